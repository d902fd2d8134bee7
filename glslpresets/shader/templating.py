import jinja2

jinja_env = jinja2.Environment(
    block_start_string="{$",
    block_end_string="$}",
    variable_start_string="{{",
    variable_end_string="}}",
    line_statement_prefix="$$",
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
)


# The header that is put in front of the source of each stage. The #line
# directive makes compiler diagnostics refer to lines in the (stripped) body.
STAGE_HEADER = """\
{{ version }}
#extension GL_ARB_shading_language_420pack : enable
#define {{ stage }}
#define PARAMETER_UNIFORM
#line 1
"""


def apply_templating(code, **kwargs):
    t = jinja_env.from_string(code)
    try:
        return t.render(**kwargs)
    except jinja2.UndefinedError as err:
        raise ValueError(f"Cannot compose shader: {err.args[0]}") from None


def stage_header(version, stage):
    """Get the header for the given version line and ``ShaderStage``."""
    return apply_templating(STAGE_HEADER, version=version, stage=stage)
