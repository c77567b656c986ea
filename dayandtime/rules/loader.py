from pathlib import Path

import yaml
from pydantic import ValidationError

from dayandtime.rules.models import CursorRules, Rules


def _strip_markdown_fences(content: str) -> str:
    """
    Return the body of the first ```yaml block, or content unchanged
    when there is none.
    """
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    clean_content = _strip_markdown_fences(path.read_text())

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means all defaults
    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_cursor_rules(path: Path) -> CursorRules:
    return load_rules(path).cursor
