from deepl_translator.engines.base import AbstractEngine
from deepl_translator.engines.deepl import DeepLEngine
from deepl_translator.engines.echo import EchoEngine

ENGINES: dict[str, type[AbstractEngine]] = {
    "deepl": DeepLEngine,
    "echo": EchoEngine,
}


def load_engine(name: str, **kwargs) -> AbstractEngine:
    """Load a translation engine by name."""
    cls = ENGINES.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown engine '{name}'. Available: {list(ENGINES.keys())}"
        )
    return cls(**kwargs)
