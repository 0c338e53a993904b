#!/usr/bin/env python3

import argparse
import base64
import logging
import sys

from lora_sensor_decoder.sensor_record import SensorRecord, SCALE


def scale_value(value):
    """physical value (m/s, °C) -> integer sent on the wire"""
    return round(value * SCALE)


def encode(record, reserved=0):
    binary = record.to_bytes(reserved)
    logging.debug("encoded {} = {}".format(record, binary.hex()))
    return base64.standard_b64encode(binary).decode('ascii')


def main(argv=None):
    parser = argparse.ArgumentParser(description='build the base64 payload a sensor node would send')

    parser.add_argument('--node-id', type=int, default=0)
    parser.add_argument('--wind-direction', type=int, default=0, help='degrees')
    parser.add_argument('--air-speed', type=float, default=0.0, help='m/s')
    parser.add_argument('--virtual-temp', type=float, default=0.0, help='°C')
    # the node puts abs(rssi) of the last downlink here
    parser.add_argument('--reserved', type=int, default=0, help='value of byte 7')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug output to stderr')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    record = SensorRecord(node_id=args.node_id,
                          wind_direction=args.wind_direction,
                          air_speed_100=scale_value(args.air_speed),
                          virtual_temp_100=scale_value(args.virtual_temp))

    try:
        print(encode(record, args.reserved))
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
