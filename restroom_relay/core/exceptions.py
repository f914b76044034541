# restroom_relay/core/exceptions.py

class RelayError(Exception):
    """
    Error controlado de un relay. El router lo convierte en
    {"success": false, "error": message} con el status_code indicado.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
