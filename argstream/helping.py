"""
Help rendering (presentation only).

render() turns a parser's descriptive fields and its registry into a rich
renderable; format_help() captures that renderable as plain text. The renderer only
reads the registry (match strings, metavars, choices, arity, help text) and
never touches parsing state.

Layout
    usage: PROG [-c COUNT] [--verbose] SOURCE

    DESCRIPTION

    positional arguments:
      source          help text wrapped at column 16
    optional arguments:
      -c, --count     help text wrapped at column 16
    EPILOG

Palette keys
- usage-label, program-name, usage-section, description-section, epilog-section
- group-label, option-name, positional-name, metavar, choice, argument-description

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- When colorful is False, styling is suppressed.
"""
from collections import defaultdict

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

INDENT = 16


def render(parser, *, colorful=True):
    """
    Build the help renderable for parser (an ArgumentParser-like object with
    prog, usage, description, epilog and registry).
    """
    styles = defaultdict(str, {
        # === Head sections ===
        "usage-label": "bold #00E6FF",  # CYAN → signature info color
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "usage-section": "bold #36C5F0",  # SKY-BLUE → softer than cyan
        "description-section": "italic #A3A3A3",  # Neutral gray
        "epilog-section": "#737373",  # Dim footer gray

        # === Groups / arguments ===
        "group-label": "bold #FFFFFF",  # Pure white headers
        "argument-description": "#9CA3AF",  # Muted gray

        # === Names / metavars ===
        "option-name": "bold #00E6FF",  # CYAN for named arguments
        "positional-name": "bold #22C55E",  # GREEN for positionals
        "metavar": "bold #FFD600",  # AMBER for parameters
        "choice": "bold #FF4D94",  # MAGENTA → choices stand out
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def metavar(argument):
        if argument.choices is not None:
            return Text.assemble(
                "{",
                Text(",").join(Text(label, styler("choice")) for label in argument.choices.labels),
                "}"
            )
        return Text(" ").join(Text(item, styler("metavar")) for item in argument.metavar or ())

    def usage(argument):
        if argument.named:
            head = Text(argument.shortest, styler("option-name"))
            if values := metavar(argument):
                head = Text.assemble(head, " ", values)
            return Text.assemble("[", head, "]")
        return metavar(argument) or Text(argument.dest, styler("positional-name"))

    def entries(label, arguments, head):
        if not arguments:
            return []
        renders = [Text(label, styler("group-label"))]
        for argument in arguments:
            name = Text.assemble("  ", head(argument))
            description = Text(argument.help or "", styler("argument-description"))
            table = Table.grid()
            table.add_column(width=INDENT, no_wrap=True)
            table.add_column()
            if len(name) <= INDENT - 2:
                table.add_row(name, description)
            else:
                renders.append(name)
                if not description:
                    continue
                table.add_row("", description)
            renders.append(table)
        return renders

    registry = parser.registry
    named = [argument for argument in registry.arguments() if argument.named]
    positionals = list(registry.positionals)

    renders = []

    head = Table.grid(padding=(0, 1))
    head.add_column(no_wrap=True)
    head.add_column()
    if parser.usage:
        head.add_row(
            Text.assemble(Text("usage", styler("usage-label")), ":"),
            Text(parser.usage, styler("usage-section")),
        )
    else:
        head.add_row(
            Text.assemble(Text("usage", styler("usage-label")), ": ", Text(parser.prog, styler("program-name"))),
            Text(" ").join(usage(argument) for argument in [*named, *positionals]),
        )
    renders.append(head)
    renders.append(Text(""))

    if parser.description:
        renders.append(Text(parser.description, styler("description-section")))
        renders.append(Text(""))

    renders.extend(entries(
        "positional arguments:",
        positionals,
        lambda argument: Text(argument.dest, styler("positional-name")),
    ))
    renders.extend(entries(
        "optional arguments:",
        named,
        lambda argument: Text(", ").join(Text(string, styler("option-name")) for string in argument.strings),
    ))

    if parser.epilog:
        renders.append(Text(parser.epilog, styler("epilog-section")))

    return Group(*renders)


def format_help(parser, *, width=80):
    """
    Render parser help as plain text at the given width.
    """
    console = Console(width=width, color_system=None, force_terminal=False, legacy_windows=False)
    with console.capture() as capture:
        console.print(render(parser, colorful=False))
    return capture.get()


__all__ = (
    "render",
    "format_help",
)
