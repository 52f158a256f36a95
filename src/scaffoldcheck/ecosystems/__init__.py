from scaffoldcheck.ecosystems.base import BaseEcosystem
from scaffoldcheck.ecosystems.node import NodeEcosystem
from scaffoldcheck.ecosystems.python import PythonEcosystem

_ECOSYSTEMS: dict[str, type[BaseEcosystem]] = {
    "node": NodeEcosystem,
    "python": PythonEcosystem,
}


def get_ecosystem(ecosystem_name: str, load_timeout: int = 30) -> BaseEcosystem:
    cls = _ECOSYSTEMS.get(ecosystem_name)
    if cls is None:
        raise ValueError(
            f"Unknown ecosystem: {ecosystem_name!r}. "
            f"Available: {', '.join(sorted(_ECOSYSTEMS))}"
        )
    return cls(load_timeout=load_timeout)


__all__ = [
    "BaseEcosystem",
    "NodeEcosystem",
    "PythonEcosystem",
    "get_ecosystem",
]
