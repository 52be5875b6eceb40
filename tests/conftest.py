import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcomx_converter.core.context import ConversionContext  # noqa: E402
from gedcomx_converter.loader.tree import GedcomNode  # noqa: E402

DATA_DIR = Path(__file__).resolve().parent / "data"


def make_node(tag, value="", pointer=None, children=None, level=0):
    return GedcomNode(
        tag=tag,
        value=value,
        pointer=pointer,
        children=children or [],
        lineno=1,
        level=level,
    )


@pytest.fixture
def ctx():
    return ConversionContext()


@pytest.fixture
def sample_ged():
    return DATA_DIR / "japanese_family.ged"
