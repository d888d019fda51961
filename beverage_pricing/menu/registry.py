BEVERAGES: dict[str, type] = {}
CONDIMENTS: dict[str, type] = {}


def registrar(registry: dict[str, type], base: type, kind: str):
    """Build a class decorator that records subclasses of ``base`` in ``registry`` by class name."""
    def register(cls: type) -> type:
        if not (isinstance(cls, type) and issubclass(cls, base)):
            raise TypeError(f"{kind} {getattr(cls, '__name__', cls)!r} must subclass {base.__name__}.")
        name = cls.__name__
        if name in registry:
            raise ValueError(f"{kind} {name} already registered.")
        registry[name] = cls
        return cls

    return register
