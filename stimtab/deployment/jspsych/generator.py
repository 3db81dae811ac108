"""jsPsych page generator.

This module provides the JsPsychPageGenerator class, which splices serialized
stimuli and timeline blocks into a single jsPsych 7 page.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from stimtab.deployment.jspsych.config import PageConfig, TimelineBlock
from stimtab.errors import ConfigurationError
from stimtab.serialization import to_script_assignment

logger = logging.getLogger(__name__)

# names the page script declares itself
_RESERVED_NAMES = frozenset({"jsPsych", "timeline"})


class JsPsychPageGenerator:
    """Generator for jsPsych experiment pages.

    Blocks run in the order they are added, after the instructions. Each
    block's stimuli are declared as a ``const`` holding a script-safe JSON
    literal and used as the block's ``timeline_variables``.

    Parameters
    ----------
    config : PageConfig
        Page configuration.
    output_dir : Path
        Output directory for generated files.

    Attributes
    ----------
    config : PageConfig
        Page configuration.
    output_dir : Path
        Output directory for generated files.
    blocks : list[TimelineBlock]
        Timeline blocks in presentation order.
    jinja_env : Environment
        Jinja2 environment for template rendering.

    Examples
    --------
    >>> from pathlib import Path
    >>> generator = JsPsychPageGenerator(
    ...     config=PageConfig(title="String Recognition"),
    ...     output_dir=Path("/tmp/experiment"),
    ... )
    >>> # generator.add_block(block); generator.generate()
    """

    def __init__(self, config: PageConfig, output_dir: Path) -> None:
        self.config = config
        self.output_dir = Path(output_dir)
        self.blocks: list[TimelineBlock] = []

        template_dir = Path(__file__).parent / "templates"
        self.jinja_env = Environment(loader=FileSystemLoader(str(template_dir)))

    def add_block(self, block: TimelineBlock) -> None:
        """Append a timeline block.

        Parameters
        ----------
        block : TimelineBlock
            Block to append.

        Raises
        ------
        ConfigurationError
            If the block name or variable name is already used, or the
            variable name is reserved by the page script.
        """
        if block.variable_name in _RESERVED_NAMES:
            raise ConfigurationError(
                f"Variable name '{block.variable_name}' is reserved"
            )
        for existing in self.blocks:
            if existing.name == block.name:
                raise ConfigurationError(f"Duplicate block name: '{block.name}'")
            if existing.variable_name == block.variable_name:
                raise ConfigurationError(
                    f"Duplicate variable name: '{block.variable_name}'"
                )

        self.blocks.append(block)
        logger.debug(
            "Added block '%s' with %d stimuli", block.name, len(block.stimuli)
        )

    def render(self) -> str:
        """Render the experiment page.

        Returns
        -------
        str
            Complete HTML document.

        Raises
        ------
        ConfigurationError
            If no blocks have been added.
        """
        if not self.blocks:
            raise ConfigurationError("At least one timeline block is required")

        instructions = self.config.instructions_config()
        template = self.jinja_env.get_template("index.html")
        return template.render(
            title=self.config.title,
            jspsych_version=self.config.jspsych_version,
            plugins=self.config.plugins,
            ui_theme=self.config.ui_theme,
            show_data_on_finish=self.config.show_data_on_finish,
            instructions=instructions,
            instruction_pages=(
                [page.to_html() for page in instructions.pages] if instructions else []
            ),
            blocks=[self._block_context(block) for block in self.blocks],
        )

    def generate(self, create_dirs: bool = True) -> Path:
        """Write the experiment page and its stimulus data.

        Creates:
        - output_dir/index.html
        - output_dir/data/stimuli.json

        Parameters
        ----------
        create_dirs : bool
            If True, create missing parents of the output directory.

        Returns
        -------
        Path
            Path to the output directory.

        Raises
        ------
        ConfigurationError
            If no blocks have been added.
        FileNotFoundError
            If create_dirs is False and the parent directory doesn't exist.
        """
        html_content = self.render()

        if not create_dirs and not self.output_dir.parent.exists():
            raise FileNotFoundError(
                f"Parent directory does not exist: {self.output_dir.parent}. "
                f"Set create_dirs=True to create it automatically."
            )
        self.output_dir.mkdir(parents=True, exist_ok=True)
        (self.output_dir / "data").mkdir(exist_ok=True)

        (self.output_dir / "index.html").write_text(html_content, encoding="utf-8")

        stimuli = {
            block.name: [record.model_dump(mode="json") for record in block.stimuli]
            for block in self.blocks
        }
        (self.output_dir / "data" / "stimuli.json").write_text(
            json.dumps(stimuli, indent=2, ensure_ascii=False), encoding="utf-8"
        )

        logger.info(
            "Generated page with %d blocks in %s", len(self.blocks), self.output_dir
        )
        return self.output_dir

    def _block_context(self, block: TimelineBlock) -> dict[str, Any]:
        """Prepare template values for one block.

        Parameters
        ----------
        block : TimelineBlock
            Block to render.

        Returns
        -------
        dict[str, Any]
            Template context for the block.
        """
        return {
            "name": block.name,
            "variable_name": block.variable_name,
            "declaration": to_script_assignment(block.stimuli, block.variable_name),
            "trial": block.trial.parameters(),
            "fixation": block.fixation,
            "randomize_order": block.randomize_order,
            "repetitions": block.repetitions,
        }
