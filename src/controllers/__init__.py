from .matrix_controller import MatrixController

__all__ = [
    'MatrixController',
]
