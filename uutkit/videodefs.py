"""Enumerations and descriptors shared by the rendering layer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "BufferType",
    "VertexTopology",
    "BufferUsage",
    "DeclareType",
    "DeclareUsage",
    "VertexDeclare",
    "TransformType",
    "RenderState",
    "RenderCull",
    "IndexFormat",
    "ImageFormat",
    "BlendOperation",
    "BlendType",
    "BlendMode",
    "TextureOperation",
    "TextureOperationValue",
    "TextureArgument",
    "TextureArgumentValue",
    "TextureFilterTarget",
    "TextureFilterType",
]


class BufferType(enum.Enum):
    """Kind of GPU buffer."""

    VERTEX = enum.auto()
    INDEX = enum.auto()
    CONSTANT = enum.auto()


class VertexTopology(enum.IntEnum):
    """How vertices are assembled into primitives."""

    POINTLIST = 0
    LINELIST = 1
    LINESTRIP = 2
    TRIANGLELIST = 3
    TRIANGLESTRIP = 4


class BufferUsage(enum.IntEnum):
    """Expected update pattern of a buffer."""

    DEFAULT = 0
    DYNAMIC = 1


class DeclareType(enum.IntEnum):
    """Component type of a vertex element."""

    BYTE = 0
    UBYTE = 1
    SHORT = 2
    USHORT = 3
    FLOAT = 4
    FIXED = 5
    DWORD = 6


class DeclareUsage(enum.IntEnum):
    """Semantic meaning of a vertex element."""

    POSITION = 0
    COLOR = 1
    TEXCOORDS = 2


_UINT8_MAX = 0xFF
_UINT16_MAX = 0xFFFF


def _check_range(name: str, value: int, limit: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} {value} is outside 0..{limit}")
    return value


@dataclass(frozen=True)
class VertexDeclare:
    """One element of a vertex layout."""

    usage: DeclareUsage
    type: DeclareType
    count: int
    offset: int
    stream: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "usage", DeclareUsage(self.usage))
        object.__setattr__(self, "type", DeclareType(self.type))
        _check_range("count", self.count, _UINT8_MAX)
        _check_range("offset", self.offset, _UINT16_MAX)
        _check_range("stream", self.stream, _UINT8_MAX)


class TransformType(enum.Enum):
    """Which transform matrix is being set."""

    WORLD = enum.auto()
    VIEW = enum.auto()
    PROJECTION = enum.auto()


class RenderState(enum.Enum):
    """Toggleable render states."""

    LIGHTNING = enum.auto()
    Z_ENABLE = enum.auto()
    ALPHA_BLEND = enum.auto()
    ALPHA_TEST = enum.auto()
    SCISSOR_TEST = enum.auto()


class RenderCull(enum.IntEnum):
    """Face culling mode."""

    NONE = 0
    CW = 1
    CCW = 2


class IndexFormat(enum.IntEnum):
    """Width of index buffer entries."""

    INDEX_16 = 0
    INDEX_32 = 1


class ImageFormat(enum.IntEnum):
    """Pixel formats for textures."""

    A8 = 0
    A8R8G8B8 = 1


class BlendOperation(enum.IntEnum):
    """How source and destination colours are combined."""

    ADD = 0
    SUB = 1
    REVSUB = 2
    MIN = 3
    MAX = 4


class BlendType(enum.Enum):
    """Which side of a blend a factor applies to."""

    SOURCE = enum.auto()
    DEST = enum.auto()


class BlendMode(enum.IntEnum):
    """Blend factors."""

    ZERO = 0
    ONE = 1
    SRCCOLOR = 2
    INVSRCCOLOR = 3
    SRCALPHA = 4
    INVSRCALPHA = 5
    DESTALPHA = 6
    INVDESTALPHA = 7
    DESTCOLOR = 8
    INVDESTCOLOR = 9
    SRCALPHASAT = 10
    BOTHSRCALPHA = 11
    BOTHINVSRCALPHA = 12


class TextureOperation(enum.IntEnum):
    """Texture stage states."""

    COLOROP = 0
    ALPHAOP = 1
    BUMPENVMAT00 = 2
    BUMPENVMAT01 = 3
    BUMPENVMAT10 = 4
    BUMPENVMAT11 = 5
    TEXCOORDINDEX = 6
    BUMPENVLSCALE = 7
    BUMPENVLOFFSET = 8
    TEXTURETRANSFORMFLAGS = 9
    CONSTANT = 10


class TextureOperationValue(enum.IntEnum):
    """Operations a texture stage can perform."""

    DISABLE = 0
    SELECTARG1 = 1
    SELECTARG2 = 2
    MODULATE = 3
    MODULATE2X = 4
    MODULATE4X = 5
    ADD = 6
    ADDSIGNED = 7
    ADDSIGNED2X = 8
    SUBTRACT = 9
    ADDSMOOTH = 10
    BLENDDIFFUSEALPHA = 11
    BLENDTEXTUREALPHA = 12
    BLENDFACTORALPHA = 13
    BLENDTEXTUREALPHAPM = 14
    BLENDCURRENTALPHA = 15
    PREMODULATE = 16
    MODULATEALPHA_ADDCOLOR = 17
    MODULATECOLOR_ADDALPHA = 18
    MODULATEINVALPHA_ADDCOLOR = 19
    MODULATEINVCOLOR_ADDALPHA = 20
    BUMPENVMAP = 21
    BUMPENVMAPLUMINANCE = 22
    DOTPRODUCT3 = 23
    MULTIPLYADD = 24
    LERP = 25


class TextureArgument(enum.IntEnum):
    """Texture stage argument slots."""

    COLORARG0 = 0
    COLORARG1 = 1
    COLORARG2 = 2
    ALPHAARG1 = 3
    ALPHAARG0 = 4
    ALPHAARG2 = 5
    RESULTARG = 6


class TextureArgumentValue(enum.IntEnum):
    """Sources a texture stage argument can take."""

    DIFFUSE = 0
    CURRENT = 1
    TEXTURE = 2
    TFACTOR = 3
    SPECULAR = 4
    TEMP = 5
    CONSTANT = 6
    COMPLEMENT = 7
    ALPHAREPLICATE = 8


class TextureFilterTarget(enum.IntEnum):
    """Which filter is being set."""

    MAG = 0
    MIN = 1
    MIP = 2


class TextureFilterType(enum.IntEnum):
    """Texture filtering modes."""

    NONE = 0
    POINT = 1
    LINEAR = 2
    ANISOTROPIC = 3
    PYRAMIDALQUAD = 4
    GAUSSIANQUAD = 5