import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from pydantic import BaseModel

PARAM_METADATA = "urlparams"


@dataclass(frozen=True)
class Param:
    """
    Per-field options of a record.

    Attach them to a dataclass field with `param(...)`, or to a pydantic
    model field with `Annotated[T, Param(...)]`.
    """
    rename: str | None = None
    """
    Key written instead of the attribute name.
    """

    flatten: bool = False
    """
    Promote the fields (or entries) of the value to the enclosing record.
    The field itself contributes no key. The value must be a record, a
    mapping or None.
    """

    skip: bool = False
    """
    Never write this field.
    """

    skip_if: Callable[[Any], bool] | None = None
    """
    Predicate on the field value; the field is skipped when it returns True.
    """


DEFAULT_PARAM = Param()


def param(
    *,
    rename: str | None = None,
    flatten: bool = False,
    skip: bool = False,
    skip_if: Callable[[Any], bool] | None = None,
    **kwargs: Any,
) -> Any:
    """
    Wrapper around `dataclasses.field` storing a Param in the field metadata.
    Remaining keyword arguments (default, default_factory, ...) are passed
    through.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[PARAM_METADATA] = Param(
        rename=rename,
        flatten=flatten,
        skip=skip,
        skip_if=skip_if,
    )
    return dataclasses.field(metadata=metadata, **kwargs)


@dataclass(frozen=True)
class RecordField:
    name: str
    key: str
    value: Any
    options: Param

    @property
    def skipped(self) -> bool:
        if self.options.skip:
            return True
        return self.options.skip_if is not None and bool(self.options.skip_if(self.value))


def is_record(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def record_fields(record: Any) -> Iterator[RecordField]:
    """Yield the fields of a dataclass or pydantic model in declaration order."""
    if isinstance(record, BaseModel):
        yield from _model_fields(record)
    else:
        yield from _dataclass_fields(record)


def _dataclass_fields(record: Any) -> Iterator[RecordField]:
    for field in dataclasses.fields(record):
        options = field.metadata.get(PARAM_METADATA, DEFAULT_PARAM)
        yield RecordField(
            name=field.name,
            key=options.rename or field.name,
            value=getattr(record, field.name),
            options=options,
        )


def _model_fields(record: BaseModel) -> Iterator[RecordField]:
    for name, info in type(record).model_fields.items():
        options = next(
            (m for m in info.metadata if isinstance(m, Param)),
            DEFAULT_PARAM
        )
        key = options.rename or info.serialization_alias or info.alias or name
        yield RecordField(
            name=name,
            key=key,
            value=getattr(record, name),
            options=options,
        )
