"""Declaration front ends layered over CastleBuilder."""

from .chain import ChainBuilder
from .path import PathBuilder
from .blocks import BlockBuilder

__all__ = ["ChainBuilder", "PathBuilder", "BlockBuilder"]
