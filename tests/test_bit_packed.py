import pytest

from sc2replay.bit_packed import (
    BitCursor,
    byte_align,
    parse_bool,
    parse_packed_int,
    rtake_n_bits,
    take_bit_array,
    take_fourcc,
    take_n_bits_into_int,
    take_null,
    take_unaligned_byte,
)
from sc2replay.errors import BitPackedError


def test_it_reads_game_events():
    data = bytes([0x00, 0xF0, 0x64, 0x2B, 0x4B, 0xA4, 0x0C, 0x00])
    tail = BitCursor(data)
    # SVarUint32: 2 bits of choice tag (00 -> MUint6) then 6 bits of value.
    tail, choice = parse_packed_int(tail, 0, 2)
    assert choice == 0
    tail, value = parse_packed_int(tail, 0, 6)
    assert value == 0
    assert tail.current_byte == 0xF0
    assert tail.offset == 0
    tail, user_id = parse_packed_int(tail, 0, 5)
    assert user_id == 16
    assert tail.offset == 5
    tail, variant_tag = parse_packed_int(tail, 0, 7)
    assert tail.offset == 4
    assert variant_tag == 116
    _, first_4_bits = rtake_n_bits(tail, 4)
    assert first_4_bits == 0x06
    tail, sync_time = take_n_bits_into_int(tail, 32)
    assert tail.offset == 4
    assert sync_time == 1656011340


INIT_DATA = bytes(
    [0x07, 0x75, 0x26, 0x7A, 0x50, 0xF8, 0xDF, 0x07, 0xBB, 0xF0, 0xE0, 0x70, 0x00, 0xF0]
    + [0xFF] * 34
    + [0x7D, 0x00, 0x00, 0xC0, 0x01, 0x7F, 0x3C, 0x00, 0xC0, 0x03, 0x1F, 0x1C, 0x00, 0xC0]
    + [0x07, 0x1F, 0x1C]
    + [0x00] * 11
)


def _bitarray(cursor, length_bits):
    cursor, length = take_n_bits_into_int(cursor, length_bits)
    return take_n_bits_into_int(cursor, length)


def test_it_reads_init_data_properties():
    tail = BitCursor(INIT_DATA)
    tail, checksum = take_n_bits_into_int(tail, 32)
    assert checksum == 125118074
    tail, array_length = parse_packed_int(tail, 0, 5)
    assert array_length == 16
    _, bitarray_length = take_n_bits_into_int(tail, 6)
    assert bitarray_length == 16
    tail, allowed_colors = _bitarray(tail, 6)
    assert allowed_colors == 65279
    _, bitarray_length = take_n_bits_into_int(tail, 8)
    assert bitarray_length == 3
    tail, allowed_races = _bitarray(tail, 8)
    assert allowed_races == 7
    _, bitarray_length = take_n_bits_into_int(tail, 6)
    assert bitarray_length == 32
    tail, allowed_difficulty = _bitarray(tail, 6)
    assert allowed_difficulty == 4261871616
    assert tail.offset == 4
    assert tail.current_byte == 0xF0
    _, bits = take_n_bits_into_int(tail, 8)
    assert bits == 0xFF
    tail, controls_length = take_n_bits_into_int(tail, 8)
    assert controls_length == 255
    tail, controls = take_bit_array(tail, controls_length)
    assert len(controls) == 32
    _, bitarray_length = take_n_bits_into_int(tail, 2)
    assert bitarray_length == 3


def test_fourcc_round_trip_when_aligned():
    tail, fourcc = take_fourcc(BitCursor(b"SC2R"))
    assert fourcc == b"SC2R"
    assert tail.remaining_bits == 0


def test_unaligned_byte_and_position():
    tail, value = take_unaligned_byte(BitCursor(b"\xab\xcd"))
    assert value == 0xAB
    assert tail.position == 8


def test_byte_align_skips_rest_of_byte():
    cursor = BitCursor(b"\xff\x01", 3)
    tail, _ = byte_align(cursor)
    assert tail.position == 8
    same, _ = byte_align(tail)
    assert same == tail


def test_parse_bool_reads_lowest_bit_first():
    cursor = BitCursor(b"\x01")
    cursor, first = parse_bool(cursor)
    cursor, second = parse_bool(cursor)
    assert (first, second) == (True, False)
    assert cursor.position == 2


def test_take_null_consumes_nothing():
    cursor = BitCursor(b"\x01", 4)
    tail, value = take_null(cursor)
    assert value is None
    assert tail == cursor


def test_packed_int_applies_offset():
    _, value = parse_packed_int(BitCursor(b"\x00"), -5, 3)
    assert value == -5


def test_sixty_four_bits_wrap_to_signed():
    _, value = take_n_bits_into_int(BitCursor(b"\xff" * 8), 64)
    assert value == -1


def test_running_out_of_bits_raises():
    with pytest.raises(BitPackedError):
        take_n_bits_into_int(BitCursor(b"\x00"), 16)
    with pytest.raises(BitPackedError):
        rtake_n_bits(BitCursor(b"\x00", 6), 4)


def test_too_many_bits_rejected():
    with pytest.raises(ValueError):
        take_n_bits_into_int(BitCursor(b"\x00" * 9), 65)
    with pytest.raises(ValueError):
        rtake_n_bits(BitCursor(b"\x00\x00"), 9)


def test_cursor_position_bounds():
    with pytest.raises(ValueError):
        BitCursor(b"\x00", 9)