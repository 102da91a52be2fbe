"""Merge options."""

from __future__ import annotations

import logging
import sys
from typing import Any

from attrs import fields, frozen

from linkmerge.exception import ConfigurationError

# Conditional import of the tomli library
if sys.version_info < (3, 11):
    import tomli
else:
    import tomllib as tomli

LOG = logging.getLogger(__name__)


@frozen
class MergeOptions:
    """Options for :py:func:`linkmerge.merge.merge`.

    Parameters
    ----------
    check_sorted : bool, optional (default False)
        Whether to verify that both operands are sorted before merging. The check
        walks both lists once, so it is off by default.
    """

    check_sorted: bool = False

    @classmethod
    def from_dict(cls, info: dict[str, Any]) -> MergeOptions:
        """Build the options from a dictionary.

        Unknown keys are logged and ignored.

        Parameters
        ----------
        info : dict
            The option values.

        Returns
        -------
        linkmerge.config.MergeOptions
            The new options object.

        Raises
        ------
        linkmerge.exception.ConfigurationError
            Raised if a value has the wrong type.
        """
        known_ = {attr.name for attr in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in info.items():
            if key not in known_:
                LOG.warning("Unknown merge option '%s'. Skipping...", key)
                continue
            kwargs[key] = value

        check_sorted = kwargs.get("check_sorted", False)
        if not isinstance(check_sorted, bool):
            msg = f"'check_sorted' must be a boolean, not {type(check_sorted).__name__}"
            raise ConfigurationError(msg)

        return cls(**kwargs)

    @classmethod
    def from_toml(cls, cfg: str) -> MergeOptions:
        """Read the options from a TOML-compatible configuration.

        The options are taken from the ``[tool.linkmerge]`` table. If the table is
        missing, the defaults are used. Suppose you have the following entry in
        ``pyproject.toml``:

        .. code-block:: toml

            [tool.linkmerge]
            check_sorted = true

        then

        .. code-block:: python

            from linkmerge import MergeOptions

            with open("pyproject.toml") as infile:
                options = MergeOptions.from_toml(infile.read())

        will enable the sortedness check.

        Parameters
        ----------
        cfg : str
            String contents of the configuration file.

        Returns
        -------
        linkmerge.config.MergeOptions
            The new options object.

        Raises
        ------
        linkmerge.exception.ConfigurationError
            Raised if the document cannot be parsed or the table is invalid.
        """
        try:
            cfg_data_ = tomli.loads(cfg)
        except tomli.TOMLDecodeError as exc:
            raise ConfigurationError(f"Unable to parse the configuration: {exc}") from exc

        tool_ = cfg_data_.get("tool", {})
        if not isinstance(tool_, dict):
            raise ConfigurationError("[tool] must be a table.")
        if "linkmerge" not in tool_:
            LOG.debug("No [tool.linkmerge] table found. Using default merge options.")
            return cls()
        table_ = tool_["linkmerge"]
        if not isinstance(table_, dict):
            raise ConfigurationError("[tool.linkmerge] must be a table.")

        return cls.from_dict(table_)
