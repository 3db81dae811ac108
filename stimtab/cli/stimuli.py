"""Stimulus commands for the stimtab CLI.

This module provides the commands of the table pipeline: generating random
string tables, adding markup, serializing timeline variables, and writing
jsPsych pages.
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from stimtab.cli.utils import (
    parse_assignments,
    print_error,
    print_info,
    print_success,
)
from stimtab.config import StimtabConfig
from stimtab.deployment.jspsych import (
    FixationConfig,
    JsPsychPageGenerator,
    KeyboardResponseTrial,
    PageConfig,
    TimelineBlock,
)
from stimtab.errors import StimtabError
from stimtab.generation import random_strings
from stimtab.markup import build_markup
from stimtab.serialization import (
    serialize_stimuli,
    to_json,
    to_script_assignment,
)
from stimtab.table import make_stimulus_table, read_table, require_columns, write_table


def _config(ctx: click.Context) -> StimtabConfig:
    return ctx.obj["config"]


def _table_path(config: StimtabConfig, path: Path) -> Path:
    """Look up relative table names in ``paths.data_dir`` when not found as given."""
    if path.exists() or path.is_absolute():
        return path
    return config.paths.data_dir / path


@click.command()
@click.argument("count", type=click.IntRange(min=0))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--length",
    type=click.IntRange(min=1),
    default=None,
    help="Characters per string",
)
@click.option("--alphabet", default=None, help="Characters to draw from")
@click.option("--seed", type=int, default=None, help="Random seed")
@click.option("--column", default=None, help="Name of the string column")
@click.option(
    "--set",
    "assignments",
    multiple=True,
    help="Constant column as NAME=VALUE (repeatable)",
)
@click.pass_context
def strings(
    ctx: click.Context,
    count: int,
    output: Path,
    length: int | None,
    alphabet: str | None,
    seed: int | None,
    column: str | None,
    assignments: tuple[str, ...],
) -> None:
    r"""Write a table of random letter strings.

    \b
    Examples:
        $ stimtab strings 20 strings.csv --seed 1 --set font_size=15pt
    """
    config = _config(ctx)
    generation = config.generation
    columns = parse_assignments(assignments, "--set")

    try:
        values = random_strings(
            count,
            length=length if length is not None else generation.length,
            alphabet=alphabet if alphabet is not None else generation.alphabet,
            unique=generation.unique,
            seed=seed if seed is not None else generation.seed,
        )
        table = make_stimulus_table(
            values, content_column=column or config.markup.content_column, **columns
        )
        write_table(table, output, create_dirs=config.paths.create_dirs)
    except (StimtabError, FileNotFoundError) as e:
        print_error(str(e))
        return

    print_success(f"Wrote {len(table)} strings to {output}")


@click.command()
@click.argument("table_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--content", "content_column", default=None, help="Content column")
@click.option(
    "--style",
    "styles",
    multiple=True,
    help="Style mapping as COLUMN=CSS_PROPERTY (repeatable, in order)",
)
@click.option("--element", default=None, help="Wrapping element (default: p)")
@click.option("--id", "element_id", default=None, help="Element id")
@click.option("--output-column", default=None, help="Markup column name")
@click.option(
    "--unique-ids/--shared-id",
    default=None,
    help="Suffix each element id with the row position",
)
@click.pass_context
def markup(
    ctx: click.Context,
    table_path: Path,
    output: Path,
    content_column: str | None,
    styles: tuple[str, ...],
    element: str | None,
    element_id: str | None,
    output_column: str | None,
    unique_ids: bool | None,
) -> None:
    r"""Add an HTML markup column to a stimulus table.

    \b
    Examples:
        $ stimtab markup strings.csv styled.csv --style font_size=font-size
        $ stimtab markup strings.csv styled.csv --element div --id stim
    """
    config = _config(ctx)
    defaults = config.markup
    style_mapping = parse_assignments(styles, "--style")

    try:
        table = read_table(_table_path(config, table_path))
        build_markup(
            table,
            content_column or defaults.content_column,
            element or defaults.element,
            list(style_mapping),
            list(style_mapping.values()),
            element_id or defaults.element_id,
            output_column or defaults.output_column,
            unique_ids=defaults.unique_ids if unique_ids is None else unique_ids,
        )
        write_table(table, output, create_dirs=config.paths.create_dirs)
    except (StimtabError, FileNotFoundError) as e:
        print_error(str(e))
        return

    print_success(f"Wrote markup for {len(table)} rows to {output}")


@click.command()
@click.argument("table_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--data",
    "data_columns",
    multiple=True,
    help="Metadata column attached to each record (repeatable, in order)",
)
@click.option("--markup-column", default=None, help="Column holding markup")
@click.option(
    "--script",
    is_flag=True,
    default=False,
    help="Write a JavaScript const declaration instead of plain JSON",
)
@click.option("--variable", default=None, help="JavaScript variable name")
@click.pass_context
def serialize(
    ctx: click.Context,
    table_path: Path,
    output: Path,
    data_columns: tuple[str, ...],
    markup_column: str | None,
    script: bool,
    variable: str | None,
) -> None:
    r"""Serialize a stimulus table as jsPsych timeline variables.

    \b
    Examples:
        $ stimtab serialize styled.csv stimuli.json --data string --data phase
        $ stimtab serialize styled.csv stimuli.js --data string --script
    """
    config = _config(ctx)
    defaults = config.serialization

    try:
        table = read_table(_table_path(config, table_path))
        records = serialize_stimuli(
            table, markup_column or defaults.markup_column, list(data_columns)
        )
        if script:
            text = to_script_assignment(
                records, variable or defaults.variable_name, indent=defaults.indent
            )
        else:
            text = to_json(records, indent=defaults.indent)
        if config.paths.create_dirs:
            output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
    except (StimtabError, FileNotFoundError) as e:
        print_error(str(e))
        return

    print_success(f"Wrote {len(records)} records to {output}")


@click.command()
@click.argument("table_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument(
    "output_dir", required=False, type=click.Path(file_okay=False, path_type=Path)
)
@click.option(
    "--data",
    "data_columns",
    multiple=True,
    help="Metadata column attached to each trial (repeatable, in order)",
)
@click.option("--markup-column", default=None, help="Column holding markup")
@click.option(
    "--block-column",
    default=None,
    help="One timeline block per distinct value of this column, in first-seen order",
)
@click.option("--title", default=None, help="Page title")
@click.option("--instructions", default=None, help="Instruction page HTML")
@click.option(
    "--choices",
    multiple=True,
    help="Response key (repeatable; default: any key)",
)
@click.option(
    "--trial-duration",
    type=click.IntRange(min=0),
    default=None,
    help="Trial duration in ms",
)
@click.option(
    "--randomize", is_flag=True, default=False, help="Shuffle stimuli within blocks"
)
@click.option(
    "--no-fixation", is_flag=True, default=False, help="Omit the fixation cross"
)
@click.pass_context
def page(
    ctx: click.Context,
    table_path: Path,
    output_dir: Path | None,
    data_columns: tuple[str, ...],
    markup_column: str | None,
    block_column: str | None,
    title: str | None,
    instructions: str | None,
    choices: tuple[str, ...],
    trial_duration: int | None,
    randomize: bool,
    no_fixation: bool,
) -> None:
    r"""Write a jsPsych page presenting a stimulus table.

    OUTPUT_DIR defaults to ``paths.output_dir`` from the configuration.

    \b
    Examples:
        $ stimtab page styled.csv experiment/ --data string --data phase
        $ stimtab page styled.csv experiment/ --block-column phase --randomize
    """
    config = _config(ctx)
    if output_dir is None:
        output_dir = config.paths.output_dir
    column = markup_column or config.serialization.markup_column
    trial = KeyboardResponseTrial(
        choices=list(choices) if choices else "ALL_KEYS",
        trial_duration=trial_duration,
    )
    fixation = FixationConfig(enabled=not no_fixation)

    try:
        table = read_table(_table_path(config, table_path))
        if block_column is None:
            groups = [("main", table)]
        else:
            require_columns(table, [block_column])
            groups = [
                (str(value), table[table[block_column] == value])
                for value in table[block_column].drop_duplicates()
            ]

        generator = JsPsychPageGenerator(
            PageConfig(
                title=title or config.page.title,
                jspsych_version=config.page.jspsych_version,
                instructions=instructions,
                show_data_on_finish=config.page.show_data_on_finish,
                ui_theme=config.page.ui_theme,
            ),
            output_dir,
        )
        for index, (name, group) in enumerate(groups):
            generator.add_block(
                TimelineBlock.from_table(
                    name,
                    group,
                    column,
                    list(data_columns),
                    variable_name=f"stimuli_{index}",
                    trial=trial,
                    fixation=fixation,
                    randomize_order=randomize,
                )
            )
        generator.generate(create_dirs=config.paths.create_dirs)
    except (StimtabError, FileNotFoundError, ValidationError) as e:
        print_error(str(e))
        return

    print_success(f"Wrote page with {len(groups)} blocks to {output_dir}")
    for name, group in groups:
        print_info(f"Block '{name}': {len(group)} stimuli")
