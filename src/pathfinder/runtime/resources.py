# pathfinder/runtime/resources.py
from pathlib import Path

from pathfinder.config.models import MapModel
from pathfinder.domain.errors import MapFormatError
from pathfinder.io.maps import MapDescription, read_map
from pathfinder.runtime.registries import make_map_reader

# maps whose connection lines use the fixed-column layout
COLUMNAR_MAP_STEMS = {"MiddleEarth"}


def resolve_format(cfg: MapModel) -> str:
    if cfg.fmt != "auto":
        return cfg.fmt
    return "columnar" if Path(cfg.file).stem in COLUMNAR_MAP_STEMS else "standard"


def decode_map(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line_no = data.count(b"\n", 0, exc.start) + 1
        raise MapFormatError(line_no, f"byte 0x{data[exc.start]:02x} is not valid UTF-8") from exc


def load_map(cfg: MapModel) -> MapDescription:
    reader = make_map_reader(cfg, fmt=resolve_format(cfg))
    text = decode_map(Path(cfg.file).read_bytes())
    return read_map(text, reader)
