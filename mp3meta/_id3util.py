# -*- coding: utf-8 -*-

# Copyright (C) 2026  The mp3meta developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.


class error(Exception):
    pass


class MP3OpenError(error, IOError):
    pass


class ID3NoHeaderError(error, ValueError):
    pass


class ID3ReadError(error, EOFError):
    pass


class ID3Warning(error, UserWarning):
    pass


class BitPaddedInt(int):
    """A synch-safe integer: the low 7 bits of each byte, big-endian."""

    def __new__(cls, value):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("BitPaddedInt needs bytes, not {}".format(
                            type(value).__name__))

        numeric_value = 0
        for byte in value:
            numeric_value = (numeric_value << 7) | (byte & 0x7F)
        return int.__new__(cls, numeric_value)

    @staticmethod
    def to_bytes(value, width=4):
        value = int(value)

        index = 0
        bytes_ = bytearray(width)
        try:
            while value:
                bytes_[index] = value & 0x7F
                value >>= 7
                index += 1
        except IndexError:
            raise ValueError('Value too wide (>%d bytes)' % width)

        bytes_.reverse()
        return bytes(bytes_)
