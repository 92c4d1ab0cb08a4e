"""Unit tests for the standard and padded layout strategies.

WHY: The two layouts differ in every byte position after the version
field. Each strategy must read its own header and offset table and leave
the source exactly where the next step expects it.

HOW: Feeds each layout an io.BytesIO positioned just after the version
field (as the assembler does) and inspects the Header, the raw offsets
and the source position.

RULES:
- Standard header ends at byte 24, padded at byte 48
- Offset reading never raises on a short table
"""

import io
import logging

import pytest

from dat_images import SAMPLE_OFFSETS, pack_padded, pack_standard
from strfile_index.core.errors import TruncatedError, UnrecognizedFlagsError, UnsupportedVersionError
from strfile_index.core.ir import StrFlags
from strfile_index.layouts import LAYOUTS, PaddedLayout, StandardLayout, select_layout
from strfile_index.layouts.padded import HEADER_SIZE as PADDED_HEADER_SIZE
from strfile_index.layouts.standard import HEADER_SIZE as STANDARD_HEADER_SIZE


def _after_version(data: bytes) -> io.BytesIO:
    source = io.BytesIO(data)
    source.seek(4)
    return source


class TestSelectLayout:

    def test_version_one_is_padded(self):
        assert isinstance(select_layout(1), PaddedLayout)

    def test_version_one_is_padded_even_when_strict(self):
        assert isinstance(select_layout(1, strict=True), PaddedLayout)

    @pytest.mark.parametrize("version", [0, 2])
    def test_known_versions_are_standard(self, version):
        assert isinstance(select_layout(version, strict=True), StandardLayout)

    def test_unknown_version_permissive_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="strfile_index.layouts"):
            layout = select_layout(7)
        assert isinstance(layout, StandardLayout)
        assert "Unknown strfile version 7" in caplog.text

    def test_unknown_version_strict_rejected(self):
        with pytest.raises(UnsupportedVersionError) as exc_info:
            select_layout(7, strict=True)
        assert exc_info.value.version == 7

    def test_known_versions_override(self):
        assert isinstance(select_layout(7, strict=True, known_versions=[7]), StandardLayout)

    def test_registry(self):
        assert LAYOUTS == {"standard": StandardLayout, "padded": PaddedLayout}


class TestStandardHeader:

    def test_reads_all_fields(self):
        data = pack_standard(count=4, longest=20, shortest=17, flags=0x4, offsets=SAMPLE_OFFSETS)
        source = _after_version(data)
        header = StandardLayout().read_header(source, 2)
        assert header.version == 2
        assert header.count == 4
        assert header.longest == 20
        assert header.shortest == 17
        assert header.flags == StrFlags.ROTATED
        assert header.delimiter == ord("%")
        assert source.tell() == STANDARD_HEADER_SIZE == 24

    def test_truncated_in_flags(self):
        data = pack_standard(count=4)[:18]
        with pytest.raises(TruncatedError) as exc_info:
            StandardLayout().read_header(_after_version(data), 2)
        assert exc_info.value.field == "flags"

    def test_missing_delimiter_padding(self):
        data = pack_standard(count=0)[:22]
        with pytest.raises(TruncatedError) as exc_info:
            StandardLayout().read_header(_after_version(data), 2)
        assert exc_info.value.field == "delimiter padding"

    def test_unknown_flag_bit(self):
        data = pack_standard(count=0, flags=0x8, offsets=[0])
        with pytest.raises(UnrecognizedFlagsError):
            StandardLayout().read_header(_after_version(data), 2)


class TestPaddedHeader:

    def test_reads_all_fields(self):
        data = pack_padded(count=4, longest=20, shortest=17, flags=0x3, offsets=SAMPLE_OFFSETS)
        source = _after_version(data)
        header = PaddedLayout().read_header(source, 1)
        assert header.version == 1
        assert header.count == 4
        assert header.longest == 20
        assert header.shortest == 17
        assert header.flags == StrFlags.RANDOM | StrFlags.ORDERED
        assert header.delimiter == ord("%")
        assert source.tell() == PADDED_HEADER_SIZE == 48

    def test_padding_bytes_are_ignored(self):
        data = bytearray(pack_padded(count=0, offsets=[0]))
        for pad in (4, 12, 20, 28, 36, 41):
            data[pad] = 0xAA
        header = PaddedLayout().read_header(_after_version(bytes(data)), 1)
        assert header.count == 0
        assert header.flags == StrFlags(0)

    def test_truncated_in_shortest(self):
        data = pack_padded(count=4)[:26]
        with pytest.raises(TruncatedError) as exc_info:
            PaddedLayout().read_header(_after_version(data), 1)
        assert exc_info.value.field == "shortest"

    def test_missing_delimiter_slot_padding(self):
        data = pack_padded(count=0)[:44]
        with pytest.raises(TruncatedError) as exc_info:
            PaddedLayout().read_header(_after_version(data), 1)
        assert exc_info.value.field == "delimiter padding"


class TestReadOffsets:

    def test_standard_reads_count_plus_one(self):
        data = pack_standard(count=4, offsets=SAMPLE_OFFSETS)
        source = io.BytesIO(data[STANDARD_HEADER_SIZE:])
        assert StandardLayout().read_offsets(source, 4) == SAMPLE_OFFSETS

    def test_padded_skips_padding(self):
        data = pack_padded(count=4, offsets=SAMPLE_OFFSETS)
        source = io.BytesIO(data[PADDED_HEADER_SIZE:])
        assert PaddedLayout().read_offsets(source, 4) == SAMPLE_OFFSETS

    def test_stops_at_count_plus_one(self):
        source = io.BytesIO(pack_standard(count=0, offsets=[0, 5, 9])[STANDARD_HEADER_SIZE:])
        assert StandardLayout().read_offsets(source, 1) == [0, 5]

    def test_short_table_stops_quietly(self):
        source = io.BytesIO(pack_standard(count=0, offsets=[0, 5])[STANDARD_HEADER_SIZE:])
        assert StandardLayout().read_offsets(source, 4) == [0, 5]

    def test_padded_offset_without_padding_not_counted(self):
        data = pack_padded(count=1, offsets=[0, 7], pad_last_offset=False)
        source = io.BytesIO(data[PADDED_HEADER_SIZE:])
        assert PaddedLayout().read_offsets(source, 1) == [0]

    def test_huge_count_on_short_file(self):
        source = io.BytesIO(pack_standard(count=0, offsets=[0, 1])[STANDARD_HEADER_SIZE:])
        assert StandardLayout().read_offsets(source, 0xFFFFFFFF) == [0, 1]
