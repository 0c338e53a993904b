import struct
from dataclasses import dataclass

# firmware struct, packed and little endian:
#   uint8_t  nodeId;          byte 0
#   uint16_t windDirection;   byte 1-2
#   uint16_t airSpeed100;     byte 3-4
#   uint16_t virtualTemp100;  byte 5-6
#   uint8_t  rssiAbs;         byte 7 (not decoded)
RECORD_FORMAT = '<BHHH'
PAYLOAD_FORMAT = RECORD_FORMAT + 'B'

SCALE = 100


@dataclass(frozen=True)
class SensorRecord(object):
    node_id: int
    wind_direction: int  # degrees
    air_speed_100: int  # m/s * 100
    virtual_temp_100: int  # °C * 100

    @property
    def air_speed(self):
        return self.air_speed_100 / SCALE

    @property
    def virtual_temp(self):
        return self.virtual_temp_100 / SCALE

    @classmethod
    def from_bytes(cls, data):
        """Read the record fields from the start of a payload, trailing bytes are ignored"""
        return cls(*struct.unpack_from(RECORD_FORMAT, data))

    def to_bytes(self, reserved=0):
        """Pack the record the way the node sends it, `reserved` goes into byte 7"""
        try:
            return struct.pack(PAYLOAD_FORMAT,
                               self.node_id,
                               self.wind_direction,
                               self.air_speed_100,
                               self.virtual_temp_100,
                               reserved)
        except struct.error as e:
            raise ValueError("cannot pack {}: {}".format(self, e)) from e
