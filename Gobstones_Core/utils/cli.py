"""Command line scaffolding on top of argparse.

CLIApp wires the usual flags (help, version, language, input and output
files) and translates every description through an optional Translator.
Subcommands are configured through CLICommandBuilder.
"""

import argparse
import os
import sys
from pathlib import Path

DEFAULT_FLAGS = {
    "help": ("-h", "--help"),
    "version": ("-v", "--version"),
    "language": ("-l", "--language"),
    "in": ("-i", "--in"),
    "out": ("-o", "--out"),
}


def find_flag_value(argv, flags):
    """Value following the last occurrence of any of `flags` in argv, or None."""
    value = None
    for index, token in enumerate(argv):
        for flag in flags:
            if token == flag and index + 1 < len(argv):
                value = argv[index + 1]
            elif flag.startswith("--") and token.startswith(flag + "="):
                value = token.split("=", 1)[1]
    return value


def env_locale(environ=None):
    """Language part of LC_ALL / LC_MESSAGES / LANG (es_AR.UTF-8 -> es)."""
    environ = os.environ if environ is None else environ
    for variable in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = environ.get(variable)
        if value and value not in ("C", "POSIX"):
            return value.split(".")[0].split("_")[0].lower()
    return None


class CLICommandBuilder:
    def __init__(self, parser, app):
        self.parser = parser
        self.app = app
        self.on_read_error_msg = None
        self.translator = app.translator
        self.flags = app.flags
        self.positionals = []
        self.options = None

    def t(self, text, interpolations=None):
        if text is None or self.translator is None:
            return text
        return self.translator.translate(text, interpolations)

    def input(self, description, on_read_error_msg):
        self.on_read_error_msg = on_read_error_msg
        self.parser.add_argument(
            *self.flags["in"], dest="input_file", metavar="<filename>", help=self.t(description)
        )
        return self

    def output(self, description):
        self.parser.add_argument(
            *self.flags["out"], dest="output_file", metavar="<filename>", help=self.t(description)
        )
        return self

    def option(self, *flags, description=None, **kwargs):
        self.parser.add_argument(*flags, help=self.t(description), **kwargs)
        return self

    def argument(self, name, description=None, **kwargs):
        self.parser.add_argument(name, help=self.t(description), **kwargs)
        self.positionals.append(kwargs.get("dest", name))
        return self

    def action(self, f):
        """Run f(builder, options) when this command is invoked."""
        self.parser.set_defaults(_handler=self, _action=f)
        return self

    def dispatch(self, options, f):
        self.options = options
        self.app.set_correct_language(getattr(options, "language", None))
        return f(self, options)

    @property
    def current_args(self):
        values = []
        for name in self.positionals:
            value = getattr(self.options, name, None)
            if isinstance(value, list):
                values.extend(str(v) for v in value)
            elif value is not None:
                values.append(str(value))
        return values

    def read(self):
        """Contents of the --in file if given, else the positional arguments joined by spaces."""
        input_file = getattr(self.options, "input_file", None)
        if input_file:
            return self.read_file_input(input_file)
        return " ".join(self.current_args)

    def write(self, data):
        output_file = getattr(self.options, "output_file", None)
        if output_file:
            self.write_to_file(output_file, data)
        else:
            self.write_to_console(data)

    def read_file_input(self, file_name):
        path = Path(file_name)
        self.ensure_or_fail_and_exit(
            path.is_file(), self.t(self.on_read_error_msg, {"fileName": file_name})
        )
        return path.read_text(encoding="utf-8")

    def write_to_file(self, file_name, contents):
        with open(file_name, "a", encoding="utf-8") as f:
            f.write(contents + "\n")

    def write_to_console(self, contents):
        print(contents)

    def ensure_or_fail_and_exit(self, condition, error):
        if not condition:
            self.write_to_console(error)
            self.exit(1)

    def output_help(self):
        self.parser.print_help()

    def exit(self, code):
        sys.exit(code)


class CLIApp(CLICommandBuilder):
    """Root command of a tool.

    `texts` holds translation keys (or plain texts without a translator) for
    name, version_number, description, help, version, language and
    language_error. The language is chosen before any help text is built:
    the --language flag if it names a known locale, else the environment
    locale if available, else the translator's current one.
    """

    def __init__(self, texts, translator=None, flags=None, argv=None, environ=None):
        self.texts = dict(texts)
        self.translator = translator
        self.flags = dict(DEFAULT_FLAGS, **(flags or {}))
        self.argv = list(sys.argv[1:] if argv is None else argv)
        self.environ = environ
        if translator is not None:
            self._preselect_language()
        parser = argparse.ArgumentParser(
            prog=self.texts["name"],
            description=self.t(self.texts.get("description")),
            add_help=False,
        )
        super().__init__(parser, self)
        self._add_common_flags(parser, root=True)
        self._subparsers = None

    def _preselect_language(self):
        for candidate in (find_flag_value(self.argv, self.flags["language"]), env_locale(self.environ)):
            if candidate and self.translator.has_locale(candidate):
                self.translator.set_locale(candidate)
                return

    def _available_languages(self):
        return " | ".join(f'"{name}"' for name in self.translator.get_available_translations())

    def _add_common_flags(self, parser, root=False):
        parser.add_argument(*self.flags["help"], action="help", help=self.t(self.texts["help"]))
        if root:
            parser.add_argument(
                *self.flags["version"],
                action="version",
                version=self.texts["version_number"],
                help=self.t(self.texts["version"]),
            )
        if self.translator is not None:
            # Subcommands leave the root default untouched.
            parser.add_argument(
                *self.flags["language"],
                dest="language",
                metavar="<locale>",
                default=self.translator.get_locale() if root else argparse.SUPPRESS,
                help=self.t(self.texts["language"], {"availableLangs": self._available_languages()}),
            )

    def set_correct_language(self, language):
        if not language or self.translator is None:
            return
        self.ensure_or_fail_and_exit(
            self.translator.has_locale(language),
            self.t(
                self.texts["language_error"],
                {"locale": language, "availableLangs": self._available_languages()},
            ),
        )
        self.translator.set_locale(language)

    def command(self, name, description, configure):
        if self._subparsers is None:
            self._subparsers = self.parser.add_subparsers(dest="command", metavar="<command>")
        text = self.t(description)
        subparser = self._subparsers.add_parser(name, help=text, description=text, add_help=False)
        self._add_common_flags(subparser)
        configure(CLICommandBuilder(subparser, self))
        return self

    def has_no_args(self):
        if not self.argv:
            return True
        return len(self.argv) == 2 and self.argv[0] in self.flags["language"]

    def output_help_on_no_args(self):
        if self.has_no_args():
            self.output_help()
            self.exit(0)

    def run(self, argv=None):
        if argv is not None:
            self.argv = list(argv)
        options = self.parser.parse_args(self.argv)
        self.options = options
        handler = getattr(options, "_handler", None)
        if handler is None:
            self.set_correct_language(getattr(options, "language", None))
            self.output_help_on_no_args()
            return None
        return handler.dispatch(options, options._action)
