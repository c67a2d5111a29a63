"""Character mapping between Aramaic writing systems."""

from aramaic_mapper.mapper import CustomHook, Mapper, MappingTable, SubstitutionStrategy, TableLookup
from aramaic_mapper.models import Category, Diacritic, Vowel, Writing
from aramaic_mapper.normalize.dotting import clear_dotting, has_dotting
from aramaic_mapper.normalize.sort import get_sort


__all__ = [
    'Category',
    'CustomHook',
    'Diacritic',
    'Mapper',
    'MappingTable',
    'SubstitutionStrategy',
    'TableLookup',
    'Vowel',
    'Writing',
    'clear_dotting',
    'get_sort',
    'has_dotting',
]
