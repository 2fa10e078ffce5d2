# -*- coding: utf-8 -*-

# Copyright (C) 2026  The mp3meta developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.


"""mp3meta reads basic descriptive metadata from MP3 files.

::

    import mp3meta
    metadata = mp3meta.read_metadata(filename)
    print(metadata.title, metadata.artist, metadata.album, metadata.year)

Tags are read from an ID3v2 header at the start of the file if there is
one, otherwise from an ID3v1 trailer in its last 128 bytes.
"""

version = (1, 0)
"""Version tuple."""

version_string = '.'.join(str(v) for v in version)
"""Version string."""


from mp3meta._id3util import (error, MP3OpenError, ID3NoHeaderError,
                              ID3ReadError, ID3Warning)


class MetaData(object):
    """Title, artist, album and year of one file.

    All four are strings and empty if the file didn't have them.
    """

    FIELDS = ("title", "artist", "album", "year")

    def __init__(self, title="", artist="", album="", year=""):
        self.title = title
        self.artist = artist
        self.album = album
        self.year = year

    def __eq__(self, other):
        if not isinstance(other, MetaData):
            return NotImplemented
        return all(getattr(self, k) == getattr(other, k)
                   for k in self.FIELDS)

    __hash__ = None

    def __repr__(self):
        kw = ["{}={}".format(k, repr(getattr(self, k))) for k in self.FIELDS]
        return "{}({})".format(type(self).__name__, ', '.join(kw))

    def pprint(self):
        """Return the non-empty fields in a human-readable format, e.g.
            title=My Title
        """
        return '\n'.join("{}={}".format(k, getattr(self, k))
                         for k in self.FIELDS if getattr(self, k))


def read_metadata(filething, full_utf16=None):
    """Read a MetaData from a path or open binary file object.

    See mp3meta.id3.read_metadata.
    """

    from mp3meta.id3 import read_metadata
    return read_metadata(filething, full_utf16)


Open = read_metadata
