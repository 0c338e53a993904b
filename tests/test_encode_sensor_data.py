"""
Tests for building node payloads
"""
import base64

import pytest

from encode_sensor_data import encode, main, scale_value
from lora_sensor_decoder.sensor_record import SensorRecord


@pytest.mark.parametrize("value, expected", [
    (0.0, 0),
    (0.27, 27),
    (1.25, 125),
    (3.5, 350),
    (22.0, 2200),
    (50.0, 5000),
])
def test_scale_value(value, expected):
    assert scale_value(value) == expected
    assert type(scale_value(value)) is int


def test_encode():
    record = SensorRecord(node_id=5, wind_direction=180, air_speed_100=350, virtual_temp_100=2200)

    assert base64.b64decode(encode(record, reserved=63)) == bytes.fromhex('05b4005e0198083f')


def test_main_prints_payload(capsys):
    assert main(['--node-id', '5', '--wind-direction', '180', '--air-speed', '3.5', '--virtual-temp', '22']) == 0

    captured = capsys.readouterr()
    assert base64.b64decode(captured.out.strip()) == bytes.fromhex('05b4005e01980800')


def test_main_rejects_value_too_wide(capsys):
    assert main(['--node-id', '300']) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error: cannot pack")
