"""
Referencias a almacenamiento externo.

Los valores del formulario nunca son dueños de los datos: leen y escriben a
través de una referencia que apunta al modelo del llamador.
"""

from typing import Any, Generic, MutableMapping, Protocol, TypeVar

T = TypeVar("T")


class Ref(Protocol[T]):
    """Acceso de lectura/escritura a un dato externo."""

    def get(self) -> T:
        ...

    def set(self, value: T) -> None:
        ...


class AttrRef(Generic[T]):
    """Referencia a un atributo de un objeto (ej: un campo de un dataclass)."""

    def __init__(self, obj: Any, name: str):
        self.obj = obj
        self.name = name

    def get(self) -> T:
        return getattr(self.obj, self.name)

    def set(self, value: T) -> None:
        setattr(self.obj, self.name, value)

    def __repr__(self) -> str:
        return f"AttrRef({type(self.obj).__name__}.{self.name})"


class ItemRef(Generic[T]):
    """Referencia a una clave de un diccionario."""

    def __init__(self, mapping: MutableMapping[str, Any], key: str):
        self.mapping = mapping
        self.key = key

    def get(self) -> T:
        return self.mapping[self.key]

    def set(self, value: T) -> None:
        self.mapping[self.key] = value

    def __repr__(self) -> str:
        return f"ItemRef({self.key!r})"


class Slot(Generic[T]):
    """Contenedor independiente de un único valor."""

    def __init__(self, value: T):
        self.value = value

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Slot({self.value!r})"
