"""Built-in CLI sub-commands for oasgen.

* :mod:`~oasgen.commands.generate` -- write the documentation header of a
  document through a code backend.
* :mod:`~oasgen.commands.convert` -- re-encode a document as JSON or YAML.
* :mod:`~oasgen.commands.inspect` -- tabulate paths and components.
* :mod:`~oasgen.commands.backends` -- list the available code backends.

Single commands export a plain callback function registered on the root
app; command groups export a :class:`typer.Typer` sub-application.
"""
