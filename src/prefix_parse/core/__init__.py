"""
Core domain models, digit-parsing primitives, and contracts.

Independent of the dispatch layer except for the extension mixin
inherited by the built-in integer types.
"""
