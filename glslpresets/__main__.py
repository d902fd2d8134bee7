"""A very tiny CLI.

Invoke using e.g. ``python -m glslpresets version`` or
``python -m glslpresets inspect shaders/crt.json``.
"""

import sys
import argparse

import glslpresets


def inspect_preset(path):
    preset = glslpresets.load_preset(path)
    kind = "preset document" if preset.is_document else "shader"
    print(f"{path}: {kind} with {len(preset.passes)} pass(es)")
    for index, definition in enumerate(preset.passes):
        print(f"  pass {index}: {definition.path}")
        for name, value in definition.parameters:
            print(f"    {name} = {value}")
    declarations = preset.declarations()
    if declarations:
        print("declared parameters:")
        for declaration in declarations.values():
            step = "" if declaration.step is None else f" step {declaration.step}"
            print(
                f"  {declaration.name} ({declaration.description}): "
                f"{declaration.initial} in [{declaration.minimum}, {declaration.maximum}]{step}"
            )


def main(argv=None):
    # Get argv so we can massage it
    if argv is None:
        argv = sys.argv
    if argv and argv[0].endswith(".py"):
        argv = argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    parser = argparse.ArgumentParser(
        prog="glslpresets",
        description="The (very basic) glslpresets CLI",
    )

    parser.add_argument(
        "command",
        action="store",
        help="The command to run: 'help', 'version' or 'inspect'",
    )
    parser.add_argument("path", nargs="?", help="The preset or shader to inspect")

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("glslpresets v" + glslpresets.__version__)
    elif command == "inspect":
        if not args.path:
            print("The inspect command needs a path")
            return 1
        try:
            inspect_preset(args.path)
        except glslpresets.ShaderPresetError as err:
            print(f"Error: {err}")
            return 1
    else:
        print(f"Invalid command '{command}'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
