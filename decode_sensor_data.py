#!/usr/bin/env python3

import argparse
import base64
import enum
import logging
import sys

from lora_sensor_decoder.sensor_record import SensorRecord

SENSOR_RECORD_MIN_LENGTH = 8

USAGE = ("Usage: decode_sensor_data.py <base64_string>",
         "Example: decode_sensor_data.py AQAAABsAAAB9AACQAA==")


class DecodeErrorKind(enum.Enum):
    INVALID_ENCODING = 'invalid_encoding'
    INSUFFICIENT_LENGTH = 'insufficient_length'


class DecodeError(ValueError):
    def __init__(self, kind, message, got=None):
        super().__init__(message)
        self.kind = kind
        self.got = got  # decoded byte count, only known after base64 succeeded


def decode(payload):
    """Decode a base64 payload as sent by a sensor node into a SensorRecord

    Raises DecodeError if the text is not standard base64 or holds less than 8 bytes.
    Field values are passed through as received, without range checks.
    """
    # CR/LF are skipped, any other non-base64 character is an error
    try:
        binary = base64.b64decode(payload.replace("\r", "").replace("\n", ""), validate=True)
    except ValueError as e:  # binascii.Error, or non-ascii text
        raise DecodeError(DecodeErrorKind.INVALID_ENCODING, "base64 decode failed: {}".format(e)) from e

    logging.debug("payload {!r} = {}".format(payload, binary.hex()))

    if len(binary) < SENSOR_RECORD_MIN_LENGTH:
        raise DecodeError(DecodeErrorKind.INSUFFICIENT_LENGTH,
                          "invalid data length: expected at least {} bytes, got {} bytes".format(
                              SENSOR_RECORD_MIN_LENGTH, len(binary)),
                          got=len(binary))

    record = SensorRecord.from_bytes(binary)
    logging.debug("decoded {}".format(record))
    return record


def format_sensor_data(record):
    return '\n'.join([
        "=== Sensor Data ===",
        "Node ID:          {}".format(record.node_id),
        "Wind Direction:   {}°".format(record.wind_direction),
        "Air Speed:        {:.2f} m/s".format(record.air_speed),
        "Virtual Temp:     {:.2f}°C".format(record.virtual_temp),
        "===================",
    ])


def main(argv=None):
    parser = argparse.ArgumentParser(description='decode a base64 sensor record received from a node')

    parser.add_argument('payload', type=str, nargs='?', help='base64 encoded sensor record')
    parser.add_argument('-v', '--verbose', action='store_true', help='log debug output to stderr')

    # unknown options and extra arguments are not argparse errors, the first one is the payload
    args, extra = parser.parse_known_args(argv)
    payload = args.payload if args.payload is not None else next(iter(extra), None)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if payload is None:
        print('\n'.join(USAGE))
        return 1

    try:
        record = decode(payload)
    except DecodeError as e:
        logging.debug("decode failed ({})".format(e.kind.value))
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    print(format_sensor_data(record))
    return 0


if __name__ == "__main__":
    sys.exit(main())
