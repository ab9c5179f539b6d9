# ferrite

`ferrite` is a library for declaring the environment variables an application
consumes. It checks their values and reports on them to the people who run the
application.

Each variable has a *specification*. A specification holds:

- the name and a description;
- a schema;
- an optional default value;
- extra constraints, examples and documentation.

Variables are read through *variable sets*. A set is **required**, **optional**
or **deprecated**. The application gets the parsed, validated value from the set.

The runtime dependencies are `regex` and `wcwidth`. The `test` extra adds
`pytest` for running the test suite.

## Concepts

### Schemas

The `ferrite.variable.schema_*` modules describe which values are valid. They
convert between the literal string found in the environment and the native
Python value.

| Schema | Values it accepts |
| --- | --- |
| `TypedNumeric` | Numbers of a fixed-size `NumericKind` (`ferrite.limits`), with an optional minimum and maximum. |
| `TypedSet` | A fixed set of `SetMember` values, each turned into a literal by a `to_literal` function. |
| `TypedBinary` | Binary data encoded by a `Marshaler`, with optional length limits. |
| `TypedOther` | Any value; it defers entirely to its `Marshaler`. |

### Specifications

A `TypedSpec` (`ferrite.variable.spec`) is built with a `TypedSpecBuilder`
(`ferrite.variable.specbuilder`). The builder can add:

- a default value;
- built-in constraints and user constraints;
- normative examples and non-normative examples;
- documentation;
- preconditions.

It can also mark the variable as required, sensitive or deprecated.

`done(schema)` finishes the specification. It raises `SpecError` if the
specification is invalid, for example if:

- the name or the description is empty;
- the schema is invalid;
- the default value does not satisfy the schema or a constraint.

### Variables

A `Variable` (`ferrite.variable.envvar`) reads the environment once, on first
use, and then records three things:

- its `Availability`: `NONE`, `INVALID`, `IGNORED` or `OK`;
- its `Source`: `NONE`, `DEFAULT` or `ENVIRONMENT`;
- any error.

An empty value counts the same as an undefined one.

### Registries

New variables go into `DEFAULT_REGISTRY` (`ferrite.variable.registry`), unless
the `ferrite.options.with_registry` option names another registry.

`ferrite.registry.new_registry(key, name, *options)` creates a custom registry.
The `ferrite.options.with_documentation_url` option records a documentation
link on it.

Registering two variables with the same name in one registry raises
`ValueError`. Names compare without regard to case on Windows.

A `RegistrySet` (`ferrite.variable.registryset`) combines several registries.
It lists their variables sorted by name, and it rejects registries that define
the same variable.

### Relationships

These options record relationships between variables:

- `ferrite.options.see_also` adds a cross-reference.
- `ferrite.options.superseded_by` names the replacement for a deprecated set.
  It may only be passed to a deprecated set.
- `ferrite.options.relevant_if` makes a set relevant only while another set has
  a truthy value. While the other set's value is falsy, the variable's
  availability is `IGNORED`.

## Reading values

`ferrite.varsets` creates variable sets with `required`, `optional` and
`deprecated`. Each takes a schema, a builder and any options.

| Call | Returns | Raises |
| --- | --- | --- |
| `Required.value()` | The value. | The variable's error if it is undefined without a default (`UndefinedError`) or invalid. |
| `Optional.value()` | A `(value, ok)` pair; `ok` is false when no value is available. | Only if the value is invalid. |
| `Deprecated.deprecated_value()` | Same as `Optional.value()`. | Same as `Optional.value()`. |

Both errors are `VariableError` subclasses.

`ferrite.variable.literal.ValueError` is one of these `VariableError`
subclasses. It is not the built-in `ValueError`.

```python
from ferrite.variable.literal import Literal
from ferrite.variable.schema_set import SetMember, TypedSet
from ferrite.variable.specbuilder import TypedSpecBuilder
from ferrite.varsets import required

schema = TypedSet(
    members=(SetMember(True), SetMember(False)),
    to_literal=lambda v: Literal("true" if v else "false"),
    kind="bool",
)

builder = TypedSpecBuilder("DEBUG", "enable or disable debugging features", zero=False)
builder.with_default(False)

debug = required(schema, builder)
debug.value()  # False unless DEBUG is set to "true"
```

## Validating the environment

`ferrite.mode.validate.run(config)` checks every variable in the registries of
a `ferrite.mode.config.Config`.

If any variable needs attention, `run` writes a column-aligned table to
`config.err`:

```
Environment Variables:

   FERRITE_WIDGET_ENABLED  enable the widget              true | false    ✓ set to false
 ❯ FERRITE_WIDGET_SPEED    set the speed of the widget    <uint>          ✗ set to -100, expected integer
```

`run` calls `config.exit(1)` if any variable is invalid. It does the same for a
required variable that is undefined. Variables whose availability is `IGNORED`
still show their errors, but they do not cause a failure.

```python
from ferrite.mode.config import Config
from ferrite.mode.validate import run
from ferrite.variable.registry import DEFAULT_REGISTRY

config = Config()
config.registries.add(DEFAULT_REGISTRY)
run(config)
```

## Exporting a `.env` file

`ferrite.mode.dotenv.run(config)` writes an `export NAME=value` line for every
variable to `config.out`, then calls `config.exit(0)`.

A comment above each line gives:

- the description;
- the default value, or whether the variable is deprecated, required or
  optional;
- whether the variable is sensitive.

The value is filled in only when it comes from the environment. A trailing
comment then shows one of two things:

- for an invalid value, the reason it was rejected;
- for a valid value written differently from its canonical form, that
  canonical form.

## Utilities

```python
from ferrite import environment
from ferrite.variable.literal import Literal
from ferrite.wordwrap import wrap

# Grapheme-aware word wrapping.
lines = wrap("The `DEBUG` variable **MAY** be left undefined.", 80)

# Shell-safe quoting of literal values.
Literal("hello world").quote()   # "'hello world'"

# Save the process environment and restore it later.
with environment.take_snapshot():
    environment.set_var("FERRITE_EXAMPLE", "1")
```

## What this package does not do

- It has no ready-made builders for common kinds of variable, such as booleans,
  strings, URLs, durations, files, network ports or enums. You supply a schema
  and a `TypedSpecBuilder` yourself.
- It has no string schema class.
- It has no single initialisation call that picks a mode from the command line.
  You call `validate.run` or `dotenv.run` with a `Config`.
- It cannot generate Markdown usage documentation.
- It installs no command-line program.