import pytest

from bitpack import BitReader, BitWriter


def test_writer_pads_last_byte_with_zeros():
    bw = BitWriter()
    bw.write_bits("0000")
    assert bw.finish() == b"\x00"
    assert bw.nbits == 4


def test_writer_msb_first():
    bw = BitWriter()
    bw.write_code(0b101, 3)
    assert bw.finish() == b"\xa0"


def test_writer_spills_into_next_byte():
    bw = BitWriter()
    bw.write_bits("111111111")
    assert bw.finish() == b"\xff\x80"
    assert bw.nbits == 9


def test_writer_empty():
    bw = BitWriter()
    assert bw.finish() == b""
    assert bw.nbits == 0


def test_reader_stops_at_bit_count():
    br = BitReader(b"\xa0", 3)
    assert [br.read_bit() for _ in range(3)] == [1, 0, 1]
    assert br.remaining() == 0
    with pytest.raises(EOFError):
        br.read_bit()


def test_reader_ignores_padding():
    assert list(BitReader(b"\xff", 2)) == [1, 1]


def test_reader_defaults_to_whole_buffer():
    assert list(BitReader(b"\x81")) == [1, 0, 0, 0, 0, 0, 0, 1]


def test_reader_empty():
    assert list(BitReader(b"", 0)) == []


def test_reader_rejects_count_past_buffer():
    with pytest.raises(EOFError):
        BitReader(b"\x00", 9)


def test_writer_reader_agree_on_bit_order():
    bits = "1011001110001"
    bw = BitWriter()
    bw.write_bits(bits)
    data = bw.finish()
    assert "".join(str(b) for b in BitReader(data, bw.nbits)) == bits


def test_reader_crosses_byte_boundary():
    assert list(BitReader(b"\x01\x80", 9)) == [0, 0, 0, 0, 0, 0, 0, 1, 1]
