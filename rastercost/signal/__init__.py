from .zigzag import identity_order, zigzag_order

__all__ = ["identity_order", "zigzag_order"]
