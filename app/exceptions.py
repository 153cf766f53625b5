# Exceções customizadas do app (tratamento de erros padronizado)


class AppError(Exception):
    """Base para erros do app."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class DBError(AppError):
    """Erro de banco de dados (conexão, query, integridade)."""
    pass


class ConfigError(AppError):
    """Erro de configuração (path inexistente, valor inválido)."""
    pass


class RegistroNaoEncontradoError(AppError):
    """Paciente, profissional ou orçamento não encontrado (id inválido)."""
    pass


class ValidacaoError(AppError):
    """Regra de negócio violada (orçamento incompleto, versão inconsistente)."""
    pass
