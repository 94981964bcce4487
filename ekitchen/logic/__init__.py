"""Core business logic layer.

Subpackages:
- parsing: model output -> Recipe records
- scaling: recipe amounts and cook time for another serving count
- matching: ingredient name similarity
- pantry: consuming a cooked recipe from the pantry

Everything here works on in-memory objects only; storage and the LLM live in
infra/ and api/.
"""
__all__ = ["parsing", "scaling", "matching", "pantry"]
