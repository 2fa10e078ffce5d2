# -*- coding: utf-8 -*-

# Copyright (C) 2026  The mp3meta developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

"""Utility classes for mp3meta.

You should not rely on the interfaces here being stable. They are
intended for internal use in mp3meta only.
"""

from mp3meta._id3util import MP3OpenError, ID3ReadError


class ByteSource(object):
    """Random access reads of exact sizes over a binary file.

    A ByteSource created from a path opens (and on close() releases) its
    own file object. A ByteSource wrapping a file object the caller
    opened leaves that object open; the caller owns it.

    Use it as a context manager so the file gets released on every exit
    path::

        with ByteSource(filename) as source:
            header = source.fullread(10)
    """

    def __init__(self, filething):
        if hasattr(filething, "read") and hasattr(filething, "seek"):
            self.filename = getattr(filething, "name", None)
            self.__fileobj = filething
            self.__owned = False
        else:
            self.filename = filething
            try:
                self.__fileobj = open(filething, "rb")
            except (EnvironmentError, TypeError, ValueError) as err:
                raise MP3OpenError(
                    "{}: could not open: {}".format(filething, err)) from err
            self.__owned = True

        try:
            self.__fileobj.seek(0, 2)
            self.size = self.__fileobj.tell()
            self.__fileobj.seek(0, 0)
            empty = self.__fileobj.read(0)
        except EnvironmentError as err:
            self.close()
            raise MP3OpenError(
                "{}: not seekable: {}".format(self.filename, err)) from err

        if not isinstance(empty, bytes):
            self.close()
            raise MP3OpenError("{}: not opened in binary mode".format(
                               self.filename))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self.__owned:
            self.__fileobj.close()

    @property
    def closed(self):
        return self.__fileobj.closed

    def tell(self):
        return self.__fileobj.tell()

    def seek(self, offset, whence=0):
        """Seek like a file object, but never outside of the stream.

        Negative end-relative offsets larger than the stream raise
        ID3ReadError instead of being platform dependent.
        """

        if whence == 2:
            target = self.size + offset
        elif whence == 1:
            target = self.tell() + offset
        else:
            target = offset

        if not 0 <= target <= self.size:
            raise ID3ReadError("{}: seek to {} outside of {} bytes".format(
                               self.filename, target, self.size))
        self.__fileobj.seek(target, 0)

    def remaining(self):
        return self.size - self.tell()

    def fullread(self, size):
        """Read exactly size bytes or raise ID3ReadError.

        The request is checked against the bytes left in the stream
        before anything is read.
        """

        if size < 0:
            raise ID3ReadError("Requested bytes ({}) less than "
                               "zero".format(size))
        if size > self.remaining():
            raise ID3ReadError("Requested {:#x} of {:#x} left in {}".format(
                               int(size), int(self.remaining()),
                               self.filename))

        data = self.__fileobj.read(size)
        if len(data) != size:
            raise ID3ReadError("Read: {:d} Requested: {:d}".format(
                               len(data), size))
        return data

