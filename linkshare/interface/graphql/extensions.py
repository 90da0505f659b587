"""Schema extensions."""

from strawberry.extensions import SchemaExtension

from linkshare.domain.error import DomainError


class ErrorCodeExtension(SchemaExtension):
    """Expose a domain error's code as ``extensions.code`` on its GraphQL error."""

    def on_operation(self):
        yield
        result = self.execution_context.result
        if result is None or not result.errors:
            return
        for error in result.errors:
            original = error.original_error
            if isinstance(original, DomainError):
                if error.extensions is None:
                    error.extensions = {}
                error.extensions["code"] = original.code
