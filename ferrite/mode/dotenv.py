"""Export of variables and their values in .env format."""

from __future__ import annotations

from typing import Any

from ferrite.mode.render import render_value
from ferrite.variable.envvar import Source
from ferrite.variable.literal import ValueError as VariableValueError


def run(config: Any) -> None:
    """Write an env file describing each variable and its current value, then exit 0."""
    out = config.out

    for index, variable in enumerate(config.registries.variables()):
        spec = variable.spec

        if index > 0:
            out.write("\n")

        out.write(f"# {spec.description} (")

        default, ok = spec.default()
        if ok:
            out.write("default: " + render_value(spec, default))
        elif spec.deprecated:
            out.write("deprecated")
        elif spec.required:
            out.write("required")
        else:
            out.write("optional")

        if spec.sensitive:
            out.write(", sensitive")

        out.write(")\n")
        out.write(f"export {spec.name}=")

        if variable.source() == Source.ENVIRONMENT:
            error = variable.error()
            if isinstance(error, VariableValueError):
                out.write(f" # {error.literal.quote()} is invalid: {error.cause}")
            else:
                value = variable.value()
                out.write(value.verbatim.quote())
                if value.verbatim != value.canonical:
                    out.write(f" # equivalent to {value.canonical.quote()}")

        out.write("\n")

    config.exit(0)