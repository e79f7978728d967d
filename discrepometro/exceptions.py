class DiscrepometroException(Exception):
    """Exceção base do Discrepômetro"""
    def __init__(self, message, code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['code'] = self.code
        rv['success'] = False
        return rv

class ValidationError(DiscrepometroException):
    """Dados inválidos para o modelo"""
    def __init__(self, message="Dados inválidos", payload=None):
        super().__init__(message, code=400, payload=payload)

class RecordNotFound(DiscrepometroException):
    """Registro inexistente no banco"""
    def __init__(self, message="Registro não encontrado", payload=None):
        super().__init__(message, code=404, payload=payload)

class ImportFailed(DiscrepometroException):
    """Falha na importação de CSV (o lote inteiro é descartado)"""
    def __init__(self, message="Falha na importação", payload=None):
        super().__init__(message, code=422, payload=payload)
