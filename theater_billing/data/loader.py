"""
Play catalog and invoice loading.

Reads YAML (or JSON, which PyYAML also accepts) documents into core models.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from theater_billing.core.models import Invoice, Performance, Play, PlayCatalog

logger = logging.getLogger(__name__)


def _read_document(path: str, kind: str) -> Any:
    """Read and parse a YAML/JSON document.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the document can't be parsed
        ValueError: If the document is empty
    """
    doc_path = Path(path)
    if not doc_path.exists():
        raise FileNotFoundError(f"{kind} file not found: {path}")

    with open(doc_path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid {kind} file {path}: {e}")

    if not data:
        raise ValueError(f"{kind} file is empty: {path}")
    return data


def load_plays(path: str) -> PlayCatalog:
    """Load the play catalog.

    The document maps each play id to ``{name, type}``.

    Args:
        path: Path to the plays file

    Returns:
        Mapping of play id to Play

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If an entry is malformed
    """
    data = _read_document(path, "Plays")
    if not isinstance(data, dict):
        raise ValueError("Plays must be a mapping of play id to play")

    catalog: Dict[str, Play] = {}
    for play_id, entry in data.items():
        if not isinstance(entry, dict):
            raise ValueError(f"Play '{play_id}' must be a dictionary")
        for key in ('name', 'type'):
            if not isinstance(entry.get(key), str) or not entry[key]:
                raise ValueError(f"Play '{play_id}' is missing '{key}'")
        catalog[str(play_id)] = Play(name=entry['name'], type=entry['type'])

    logger.debug("Loaded %d plays from %s", len(catalog), path)
    return catalog


def load_invoices(path: str) -> List[Invoice]:
    """Load invoices.

    The document is a list of ``{customer, performances}`` entries, each
    performance being ``{playID, audience}``. A single invoice mapping is
    accepted too.

    Args:
        path: Path to the invoices file

    Returns:
        Invoices in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If an entry is malformed
        InvalidAudience: If a performance has a negative audience
    """
    data = _read_document(path, "Invoices")
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError("Invoices must be a list")

    invoices = [_parse_invoice(entry, f"invoices[{i}]") for i, entry in enumerate(data)]
    logger.debug("Loaded %d invoices from %s", len(invoices), path)
    return invoices


def _parse_invoice(data: Any, path: str) -> Invoice:
    if not isinstance(data, dict):
        raise ValueError(f"{path} must be a dictionary")

    customer = data.get('customer')
    if not isinstance(customer, str) or not customer:
        raise ValueError(f"Missing required 'customer' in {path}")

    performances_data = data.get('performances')
    if not isinstance(performances_data, list):
        raise ValueError(f"'performances' in {path} must be a list")

    performances = []
    for i, item in enumerate(performances_data):
        item_path = f"{path}.performances[{i}]"
        if not isinstance(item, dict):
            raise ValueError(f"{item_path} must be a dictionary")

        play_id = item.get('playID')
        if not isinstance(play_id, str) or not play_id:
            raise ValueError(f"Missing required 'playID' in {item_path}")

        audience = item.get('audience')
        if isinstance(audience, bool) or not isinstance(audience, int):
            raise ValueError(f"'audience' in {item_path} must be an integer")

        performances.append(Performance(play_id=play_id, audience=audience))

    return Invoice(customer=customer, performances=tuple(performances))
