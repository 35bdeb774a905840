"""
Per-call parse options.

Options arrive as a ParseOptions instance, a mapping or keyword arguments.
Unknown keys are reported with a PersonnummerWarning and otherwise ignored.
"""

import logging
import warnings
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from halo_personnummer import config
from halo_personnummer.clock import Clock, SystemClock
from halo_personnummer.exceptions import PersonnummerWarning

logger = logging.getLogger(__name__)


def _default_allow_coordination() -> bool:
    return config.settings.allow_coordination_number


class ParseOptions(BaseModel):
    """Options honored by parse() and valid()."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    allow_coordination_number: bool = Field(
        default_factory=_default_allow_coordination,
        alias="allowCoordinationNumber",
        description="Accept numbers whose day is offset by 60",
    )
    clock: Clock = Field(
        default_factory=SystemClock,
        description="Source of 'now' for century inference and age",
    )


KNOWN_OPTIONS = frozenset(
    name
    for field_name, info in ParseOptions.model_fields.items()
    for name in (field_name, info.alias)
    if name
)


def build_options(
    options: Union[ParseOptions, Mapping[str, Any], None] = None,
    *,
    stacklevel: int = 2,
    **kwargs: Any,
) -> ParseOptions:
    """
    Normalize caller options into a ParseOptions.

    Args:
        options: ParseOptions, mapping of option names, or None
        **kwargs: Extra options, merged over ``options``
        stacklevel: Frames above this call to attribute unknown-key warnings to

    Returns:
        ParseOptions with defaults filled in
    """
    if isinstance(options, ParseOptions) and not kwargs:
        return options

    if options is None:
        raw: dict[str, Any] = {}
    elif isinstance(options, ParseOptions):
        raw = dict(options)
    elif isinstance(options, Mapping):
        raw = dict(options)
    else:
        raise TypeError(
            f"options must be a mapping or ParseOptions, not {type(options).__name__}"
        )
    raw.update(kwargs)

    known = {}
    for key, value in raw.items():
        if key in KNOWN_OPTIONS:
            known[key] = value
        else:
            logger.debug("Ignoring unknown personnummer option %r", key)
            warnings.warn(
                f"Unrecognized personnummer option: {key}",
                PersonnummerWarning,
                stacklevel=stacklevel,
            )

    return ParseOptions.model_validate(known)
