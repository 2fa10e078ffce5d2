# -*- coding: utf-8 -*-

# Copyright (C) 2026  The mp3meta developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of version 2 of the GNU General Public License as
# published by the Free Software Foundation.

"""Read title, artist, album and year from ID3v2 and ID3v1 tags.

Only the four text frames TIT2, TPE1, TALB and TYER are understood. ID3v1
fields are returned exactly as stored, padding included.
"""

import struct
from warnings import warn

import mp3meta
from mp3meta._util import ByteSource
from mp3meta._id3util import (error, MP3OpenError, ID3NoHeaderError,
                              ID3ReadError, ID3Warning, BitPaddedInt)

__all__ = ['ID3', 'ParseID3v1', 'read_id3v1', 'has_id3v2', 'decode_text',
           'read_metadata', 'Open', 'Frames', 'error', 'MP3OpenError',
           'ID3NoHeaderError', 'ID3ReadError', 'ID3Warning', 'BitPaddedInt']


def decode_text(data, full_utf16=False):
    """Decode the payload of a text frame.

    The first byte selects the encoding: 0 is ISO-8859-1, 1 is UTF-16.
    Without full_utf16 only the second byte of each UTF-16 code unit is
    kept, which is right for ASCII text only. Unknown encodings return
    the remaining bytes as they are.
    """

    if not data:
        return ""

    encoding, text = data[0], data[1:]
    if encoding == 1:
        if full_utf16:
            if text[:2] in (b'\xff\xfe', b'\xfe\xff'):
                return text.decode('utf-16', 'replace')
            return text.decode('utf-16-le', 'replace')
        text = text[1::2]
    return text.decode('latin1')


class Frame(object):
    """Fundamental unit of ID3 data.

    Subclasses are looked up by frame ID in Frames; the class name is the
    frame ID.
    """

    FrameID = property(
        lambda s: type(s).__name__,
        doc="ID3v2 four character frame ID")

    @classmethod
    def fromData(cls, data, full_utf16=False):
        """Construct this ID3 frame from raw payload bytes."""
        raise NotImplementedError


class TextFrame(Frame):
    """Text strings.

    Text frames have a 'text' attribute holding the decoded payload and
    name the MetaData attribute they fill in 'field'.
    """

    field = None

    def __init__(self, text=""):
        self.text = text

    def __str__(self):
        return self.text

    def __eq__(self, other):
        if isinstance(other, str):
            return self.text == other
        return type(self) is type(other) and self.text == other.text

    __hash__ = None

    def __repr__(self):
        return "{}(text={!r})".format(type(self).__name__, self.text)

    @classmethod
    def fromData(cls, data, full_utf16=False):
        return cls(decode_text(data, full_utf16))

    def apply(self, metadata):
        setattr(metadata, self.field, self.text)


class TALB(TextFrame):
    "Album"
    field = "album"


class TIT2(TextFrame):
    "Title"
    field = "title"


class TPE1(TextFrame):
    "Lead Artist/Performer/Soloist/Group"
    field = "artist"


class TYER(TextFrame):
    "Year of recording"
    field = "year"


Frames = {k: v for k, v in globals().items() if
          (len(k) == 4 and isinstance(v, type) and issubclass(v, Frame))}


def has_id3v2(source):
    """Whether the source starts with an ID3v2 header.

    Leaves the source positioned after the first three bytes.
    """

    source.seek(0)
    return source.fullread(3) == b'ID3'


class ID3(object):
    """An ID3v2 tag reader.

    load() walks the frames of the tag at the start of a ByteSource and
    stores the recognized ones into a MetaData. Frames that would run
    past the size declared in the tag header end the walk.
    """

    FULL_UTF16 = False

    def __init__(self, full_utf16=None):
        if full_utf16 is not None:
            self.FULL_UTF16 = full_utf16
        self.size = 0

    def load(self, source, metadata):
        self.__load_header(source)
        for frame in self.__read_frames(source):
            frame.apply(metadata)
        return metadata

    def __load_header(self, source):
        source.seek(0)
        data = source.fullread(10)
        id3, vmaj, vrev, flags, size = struct.unpack('>3sBBB4s', data)
        if id3 != b'ID3':
            raise ID3NoHeaderError("'{}' doesn't start with an "
                                   "ID3 tag".format(source.filename))
        self.size = BitPaddedInt(size)

    def __read_frames(self, source):
        # counted from the tag start but compared to the body size, so
        # a frame header always fits before the tag end
        end = self.size + 10
        consumed = 10
        while consumed < self.size:
            header = source.fullread(10)
            name, size, flags = struct.unpack('>4s4sH', header)
            name = name.decode('latin1')
            size = BitPaddedInt(size)
            consumed += 10 + size

            if consumed > end:
                warn("{}: {} frame of {} bytes crosses the tag end at "
                     "{}".format(source.filename, repr(name), size, end),
                     ID3Warning)
                return

            if size == 0:
                continue  # nothing to decode

            framedata = source.fullread(size)
            try:
                tag = Frames[name]
            except KeyError:
                continue
            yield tag.fromData(framedata, self.FULL_UTF16)


def ParseID3v1(data, metadata=None):
    """Parse a 128 byte ID3v1 block into a MetaData.

    Returns None if the block has no ID3v1 tag. Fields are not trimmed.
    """

    if len(data) != 128:
        return None

    tag, title, artist, album, year = struct.unpack(
        "3s30s30s30s4s", data[:97])

    if tag != b"TAG":
        return None

    if metadata is None:
        metadata = mp3meta.MetaData()
    metadata.title = title.decode('latin1')
    metadata.artist = artist.decode('latin1')
    metadata.album = album.decode('latin1')
    metadata.year = year.decode('latin1')
    return metadata


def read_id3v1(source, metadata):
    """Fill metadata from the ID3v1 tag in the last 128 bytes of source.

    Raises ID3NoHeaderError if there is none.
    """

    if source.size < 128:
        raise ID3NoHeaderError("'{}' has no ID3v1 tag: too small ({} "
                               "bytes)".format(source.filename, source.size))

    source.seek(-128, 2)
    if ParseID3v1(source.fullread(128), metadata) is None:
        raise ID3NoHeaderError("'{}' has no ID3v1 tag".format(
                               source.filename))
    return metadata


def read_metadata(filething, full_utf16=None):
    """Read title, artist, album and year from an MP3 file.

    filething is a path or an open binary file object; full_utf16
    overrides ID3.FULL_UTF16 for this call. A file starting with an
    ID3v2 header is always read from that tag; anything else must
    carry an ID3v1 tag.

    Raises MP3OpenError if the file can't be opened, ID3NoHeaderError
    if no tag is found and ID3ReadError if the file ends in the middle
    of the tag.
    """

    metadata = mp3meta.MetaData()
    with ByteSource(filething) as source:
        if has_id3v2(source):
            ID3(full_utf16).load(source, metadata)
        else:
            read_id3v1(source, metadata)
    return metadata

# support open(filename) as interface
Open = read_metadata
