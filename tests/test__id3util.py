from tests import TestCase, add
from mp3meta._id3util import BitPaddedInt


class BitPaddedIntTest(TestCase):

    def test_zero(self):
        self.assertEqual(BitPaddedInt(b'\x00\x00\x00\x00'), 0)

    def test_1(self):
        self.assertEqual(BitPaddedInt(b'\x00\x00\x00\x01'), 1)

    def test_129(self):
        self.assertEqual(BitPaddedInt(b'\x00\x00\x01\x01'), 0x81)

    def test_129b(self):
        self.assertEqual(BitPaddedInt(b'\x00\x00\x01\x81'), 0x81)

    def test_header_size(self):
        # 0x00 0x00 0x02 0x01 is the size of a 257 byte tag body
        self.assertEqual(BitPaddedInt(b'\x00\x00\x02\x01'), 257)

    def test_formula(self):
        for data in [b'\x12\x34\x56\x78', b'\x7f\x00\x7f\x00',
                     b'\x01\x02\x03\x04']:
            b0, b1, b2, b3 = data
            self.assertEqual(
                BitPaddedInt(data),
                (b0 & 0x7F) << 21 | (b1 & 0x7F) << 14 |
                (b2 & 0x7F) << 7 | (b3 & 0x7F))

    def test_high_bits_masked(self):
        self.assertEqual(BitPaddedInt(b'\xff\xff\xff\xff'), 0x0FFFFFFF)
        self.assertEqual(BitPaddedInt(b'\x80\x80\x80\x80'), 0)

    def test_bytearray(self):
        self.assertEqual(BitPaddedInt(bytearray(b'\x00\x00\x01\x01')), 0x81)

    def test_bad_type(self):
        self.assertRaises(TypeError, BitPaddedInt, "1234")

    def test_s0(self):
        self.assertEqual(BitPaddedInt.to_bytes(0), b'\x00\x00\x00\x00')

    def test_s1(self):
        self.assertEqual(BitPaddedInt.to_bytes(1), b'\x00\x00\x00\x01')

    def test_s129(self):
        self.assertEqual(BitPaddedInt.to_bytes(129), b'\x00\x00\x01\x01')

    def test_w129(self):
        self.assertEqual(BitPaddedInt.to_bytes(129, width=2), b'\x01\x01')

    def test_wsmall(self):
        self.assertRaises(ValueError, BitPaddedInt.to_bytes, 129, width=1)

    def test_too_wide_for_synchsafe(self):
        self.assertRaises(ValueError, BitPaddedInt.to_bytes, 2 ** 28)

    def test_int_rejected(self):
        self.assertRaises(TypeError, BitPaddedInt, 0x0101)

    def test_decoded_size_encodes_back(self):
        size = BitPaddedInt(b"\x00\x00\x02\x01")
        self.assertEqual(BitPaddedInt.to_bytes(size), b"\x00\x00\x02\x01")

add(BitPaddedIntTest)
