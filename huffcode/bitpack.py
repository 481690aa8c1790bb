class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.nbits = 0   # total bits written

    def write_bit(self, bit: int):
        self._cur = (self._cur << 1) | (1 if bit else 0)
        self._nbits += 1
        self.nbits += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        for i in range(length - 1, -1, -1):
            self.write_bit((code >> i) & 1)

    def write_bits(self, bits: str):
        """Write a '0'/'1' string in order."""
        for b in bits:
            self.write_bit(b == "1")

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)


class BitReader:
    """
    Reads the first 'nbits' bits of data, MSB-first.
    Padding past nbits is never returned.
    """
    def __init__(self, data: bytes, nbits: int = None):
        if nbits is None:
            nbits = len(data) * 8
        if nbits < 0:
            raise ValueError("bit count must be non-negative")
        if nbits > len(data) * 8:
            raise EOFError(f"bit count {nbits} exceeds {len(data)} payload bytes")
        self.nbits = nbits
        self.i = 0
        self.data = data

    def remaining(self) -> int:
        return self.nbits - self.i

    def read_bit(self) -> int:
        if self.i >= self.nbits:
            raise EOFError("Unexpected end of bitstream")
        b = (self.data[self.i >> 3] >> (7 - (self.i & 7))) & 1
        self.i += 1
        return b

    def __iter__(self):
        while self.i < self.nbits:
            yield self.read_bit()
