class ValidationError(Exception):
    """El item no cumple las reglas del dominio."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(Exception):
    def __init__(self, message: str = "item not found"):
        super().__init__(message)
        self.message = message


class StorageError(Exception):
    """Fallo de conexión, restricción o consulta en la base de datos."""

    def __init__(self, message: str = "internal storage error"):
        super().__init__(message)
        self.message = message
