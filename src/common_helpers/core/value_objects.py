class ChunkSize:
    """
    Value Object universal: tamaño de bloque para escrituras por partes.
    Invariante: value >= 1 (un bloque de 0 bytes nunca avanza).
    """

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Chunk size must be an int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError("Must be positive")
        self.value = value

    def split(self, data: bytes) -> list[bytes]:
        """Parte `data` en bloques consecutivos de como máximo `value` bytes."""
        return [data[i : i + self.value] for i in range(0, len(data), self.value)]

    def __repr__(self) -> str:
        return f"ChunkSize({self.value})"
