"""Split raw TAF text into a header and change-group segments."""

import logging
from dataclasses import dataclass, replace
from typing import Optional, List, Tuple

from aviation_wx.weather.models import TafSegment, TafSegmentTag

logger = logging.getLogger(__name__)

CHANGE_GROUP_STARTERS: Tuple[str, ...] = ("FM", "TEMPO", "BECMG", "PROB30", "PROB40")


@dataclass(frozen=True)
class _PendingSegment:
    """Segment being accumulated during the scan."""

    tag: str
    time: str = ""
    body: str = ""

    def append(self, token: str) -> '_PendingSegment':
        return replace(self, body=f"{self.body} {token}" if self.body else token)

    def finish(self, header: str) -> Optional[TafSegment]:
        if not self.body.strip():
            return None
        return TafSegment(tag=self.tag, time=self.time, body=self.body, header=header)


class TafSegmenter:
    """
    Forward scanner splitting a TAF into segments.

    The first segment is always the HEADER (everything before the first
    change group), followed by one segment per FM/TEMPO/BECMG/PROB30/PROB40
    group in source order. Groups with no text are dropped, which includes
    the BASE group since the header takes every token before the first
    change group.

    Example:
        segments = TafSegmenter.segment(
            "TAF KJFK 121720Z 1218/1318 18010KT P6SM FM1300 22015KT"
        )
        [s.tag for s in segments]  # ['HEADER', 'FM']
    """

    @staticmethod
    def is_starter(token: str) -> bool:
        return token.startswith(CHANGE_GROUP_STARTERS)

    @staticmethod
    def tag_for(starter: str) -> str:
        """Segment tag for a change-group starter token."""
        if starter.startswith("FM"):
            return TafSegmentTag.FM.value
        if starter.startswith("PROB"):
            return starter[:6]
        return starter

    @classmethod
    def segment(cls, raw_text: Optional[str]) -> List[TafSegment]:
        """
        Segment a TAF.

        Args:
            raw_text: Raw TAF text, None is treated as empty

        Returns:
            List of TafSegment, HEADER first
        """
        parts = (raw_text or "").strip().split()

        first_group = len(parts)
        for index, token in enumerate(parts):
            if cls.is_starter(token):
                first_group = index
                break

        header = " ".join(parts[:first_group])
        segments: List[TafSegment] = []

        current = _PendingSegment(tag=TafSegmentTag.BASE.value)
        for token in parts[first_group:]:
            if cls.is_starter(token):
                cls._emit(segments, current.finish(header))
                current = _PendingSegment(tag=cls.tag_for(token), time=token)
            else:
                current = current.append(token)
        cls._emit(segments, current.finish(header))

        logger.debug("TAF split into %d change groups", len(segments))
        header_segment = TafSegment(tag=TafSegmentTag.HEADER.value, body=header, header=header)
        return [header_segment] + segments

    @staticmethod
    def _emit(segments: List[TafSegment], segment: Optional[TafSegment]) -> None:
        if segment is not None:
            segments.append(segment)


def segment_taf(raw_text: Optional[str]) -> List[TafSegment]:
    """Split a raw TAF into segments. See TafSegmenter.segment."""
    return TafSegmenter.segment(raw_text)
