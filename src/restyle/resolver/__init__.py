from restyle.resolver.resolver import KIND_PRECEDENCE, resolve

__all__ = ["KIND_PRECEDENCE", "resolve"]
