from .conversion_service import ConversionService

__all__ = ['ConversionService']
