"""AI commentary on clustering results via the OpenAI chat API.

``analyze_clustering_results`` never raises: a missing key, a missing
library or an API failure all come back as a readable message that the
caller displays like any other commentary.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import List, Optional, Sequence

# Ensure .env is loaded by importing config
from .config import LLM_MODEL, OPENAI_API_KEY as CONFIG_OPENAI_API_KEY
from .models.cluster import ClusterResult

logger = logging.getLogger(__name__)

DATASET_DESCRIPTIONS = {
    "Moons": "Two interlocking, non-convex crescent shapes. A classic test for algorithms that can handle non-linear structures.",
    "Circles": "Two concentric circles. A key test for algorithms that are not based on linear separability, where Spectral Clustering should excel.",
    "Blobs": "Several distinct, globular (Gaussian) clusters. Well-suited for centroid-based algorithms like K-Means.",
}
CUSTOM_DESCRIPTION = "A custom user-provided dataset."

SYSTEM_PROMPT = "You are an expert data scientist specializing in clustering algorithms."

MISSING_KEY_MESSAGE = (
    "Error: OPENAI_API_KEY environment variable not set. "
    "Please configure it to use AI analysis."
)
MISSING_LIBRARY_MESSAGE = "Error: OpenAI library not available. Install with: pip install openai"


def _api_key() -> Optional[str]:
    # Check both os.environ and config (config loads from .env file)
    return os.environ.get("OPENAI_API_KEY") or CONFIG_OPENAI_API_KEY


def _format_result(result: ClusterResult) -> str:
    m = result.metrics
    return (
        "---\n"
        f"Algorithm: {result.algorithm}\n"
        f"Parameters: {json.dumps(result.params)}\n"
        "Metrics:\n"
        f"  - Silhouette Score: {m.silhouette} (higher is better, range -1 to 1)\n"
        f"  - Calinski-Harabasz Index: {m.calinski_harabasz} (higher is better)\n"
        f"  - Davies-Bouldin Score: {m.davies_bouldin} (lower is better, closer to 0)\n"
    )


def build_analysis_prompt(results: Sequence[ClusterResult], dataset_name: str) -> str:
    """Prompt asking for a Markdown comparison of the four results."""
    description = DATASET_DESCRIPTIONS.get(dataset_name, CUSTOM_DESCRIPTION)
    blocks = "\n".join(_format_result(r) for r in results)
    return (
        "Your task is to analyze and compare the performance of four clustering "
        "algorithms on a given dataset.\n\n"
        f"Dataset Name: {dataset_name}\n"
        f"Dataset Characteristics: {description}\n\n"
        "Here are the results and metrics for each algorithm:\n"
        f"{blocks}"
        "---\n\n"
        "Based on the provided metrics AND the known characteristics of the dataset, "
        "please provide a comprehensive analysis in Markdown format. Your analysis should include:\n\n"
        "1. **Overall Summary:** A brief conclusion about which algorithm appears to be "
        "the most suitable for this dataset and why.\n"
        "2. **Algorithm Comparison:**\n"
        "   * Discuss the performance of Spectral Clustering compared to the others. Relate its "
        f"performance directly to the geometric properties of the '{dataset_name}' dataset. "
        "For the 'Circles' dataset, specifically highlight how it succeeds where others fail.\n"
        "   * Compare K-Means, Agglomerative Clustering, and DBSCAN, referencing their metrics "
        "and how the dataset shape impacts their performance.\n"
        "3. **Metric Interpretation:** Briefly explain what the combination of Silhouette, "
        "Calinski-Harabasz, and Davies-Bouldin scores indicates about the quality of the "
        "clusters (e.g., density, separation).\n"
        "4. **Recommendation:** Conclude with a clear recommendation for the best performing "
        f"algorithm for the '{dataset_name}' dataset, justifying your choice based on both "
        "the metrics and the data's geometry.\n"
        "5. **Spectral Clustering Walkthrough:** Explain how spectral clustering works on "
        "this particular dataset.\n"
    )


def analyze_clustering_results(
    results: Sequence[ClusterResult],
    dataset_name: str,
    *,
    model: Optional[str] = None,
) -> str:
    """Ask the LLM for a Markdown analysis of ``results``.

    Returns:
        The model's Markdown text, or a message starting with "Error:" /
        "An error occurred" when the analysis could not be produced.
    """
    model = model or LLM_MODEL

    api_key = _api_key()
    if not api_key:
        logger.error("OPENAI_API_KEY not found; skipping AI analysis")
        return MISSING_KEY_MESSAGE

    try:
        from openai import OpenAI
    except ImportError:
        return MISSING_LIBRARY_MESSAGE

    try:
        client = OpenAI(api_key=api_key)
        resp = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_analysis_prompt(results, dataset_name)},
            ],
            temperature=0.3,
        )
    except Exception as e:
        logger.error("Error calling OpenAI API: %s", e)
        return f"An error occurred while analyzing the results: {e}"

    if not resp.choices:
        return "No response from model"
    content = resp.choices[0].message.content
    if not content or not content.strip():
        return "No response from model"
    return content.strip()


async def analyze_clustering_results_async(
    results: Sequence[ClusterResult],
    dataset_name: str,
    *,
    model: Optional[str] = None,
) -> str:
    """Run the blocking API call in a worker thread."""
    return await asyncio.to_thread(
        analyze_clustering_results, results, dataset_name, model=model
    )


def list_available_models() -> List[str]:
    """Model ids the configured key can use.

    Raises:
        RuntimeError: if no API key is configured.
    """
    api_key = _api_key()
    if not api_key:
        raise RuntimeError("OpenAI API key not configured; cannot list models")

    from openai import OpenAI

    client = OpenAI(api_key=api_key)
    return sorted(m.id for m in client.models.list())
