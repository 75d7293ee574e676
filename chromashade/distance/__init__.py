from .ciede2000 import delta_e_2000, np_delta_e_2000

__all__ = ['delta_e_2000', 'np_delta_e_2000']
