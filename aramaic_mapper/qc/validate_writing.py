"""Position-by-position validation of a pair of writing systems."""

from dataclasses import dataclass

from aramaic_mapper.models import Category, Writing


@dataclass
class ValidationResult:
    """Result of validation."""

    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_writing_pair(from_writing: Writing, to_writing: Writing) -> ValidationResult:
    """
    Check that two writing systems can be mapped onto each other.

    Args:
        from_writing: Source writing system
        to_writing: Destination writing system

    Returns:
        Validation result. Errors are destination categories shorter than
        the source and missing required categories; warnings are longer
        destination categories, categories present on one side only and
        source characters repeated across categories.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for cat in Category:
        src = from_writing.category(cat)
        dst = to_writing.category(cat)

        if src is None or dst is None:
            if cat.required:
                side = "source" if src is None else "destination"
                errors.append(f"{cat.value}: missing in {side} writing")
            elif src is not None or dst is not None:
                side = "source" if dst is None else "destination"
                warnings.append(f"{cat.value}: only present in {side} writing, not mapped")
            continue

        if len(src) > len(dst):
            errors.append(f"{cat.value}: {len(src)} source vs {len(dst)} destination characters")
        elif len(src) < len(dst):
            warnings.append(
                f"{cat.value}: last {len(dst) - len(src)} destination characters are never produced"
            )

    seen: dict[str, Category] = {}
    for cat in Category:
        for char in from_writing.category(cat) or ():
            first = seen.setdefault(char, cat)
            if first is not cat:
                warnings.append(
                    f"{char!r}: mapped in both {first.value} and {cat.value}, "
                    f"{cat.value} wins"
                )

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)
