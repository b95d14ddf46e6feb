"""
Contract artifact loading (TronBox build output)
"""

import json
import logging
from pathlib import Path
from typing import Any

from tron_tip712.exceptions import ArtifactError

logger = logging.getLogger(__name__)


def load_artifact(path: str | Path) -> dict[str, Any]:
    """
    Load a compiled contract artifact.

    Args:
        path: Path to the artifact JSON (e.g. build/contracts/Tip712Verifier.json)

    Returns:
        Artifact dict with at least an "abi" list

    Raises:
        ArtifactError: If the file is missing, not JSON, or has no ABI
    """
    artifact_path = Path(path)
    try:
        artifact = json.loads(artifact_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ArtifactError(f"Contract artifact not found: {artifact_path}") from e
    except json.JSONDecodeError as e:
        raise ArtifactError(f"Contract artifact {artifact_path} is not valid JSON: {e}") from e

    if not isinstance(artifact, dict) or not isinstance(artifact.get("abi"), list):
        raise ArtifactError(f"Contract artifact {artifact_path} has no 'abi' list")

    logger.info(
        "Loaded artifact %s (contract=%s, abi entries=%d)",
        artifact_path,
        artifact.get("contractName", "?"),
        len(artifact["abi"]),
    )
    return artifact
