"""
Clustering Visualizer - Main Entry Point

This module provides the command-line interface for:
- Generating synthetic 2-D datasets (moons, blobs, circles)
- Running the four simulated clustering algorithms on a dataset or CSV file
- Serving the FastAPI backend for the web UI
- Listing the LLM models available for AI commentary

Example usage:
    # Generate a dataset and write it to CSV
    python -m clusterviz.pipeline generate --dataset Circles --out circles.csv

    # Analyze a generated dataset
    python -m clusterviz.pipeline analyze --dataset Moons

    # Analyze an uploaded CSV (last column is a label by default)
    python -m clusterviz.pipeline analyze --csv data/iris.csv --k 3

    # Start the FastAPI backend
    python -m clusterviz.pipeline serve --port 8000
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from .config import DEFAULT_N_SAMPLES, has_openai


def generate(dataset: str, n_samples: int = DEFAULT_N_SAMPLES, out: Optional[str] = None) -> None:
    """Generate a synthetic dataset and print or save it.

    Args:
        dataset: Dataset type name (Moons, Blobs, Circles)
        n_samples: Number of points
        out: Optional CSV path; prints a preview when omitted
    """
    import pandas as pd

    from .datasets.generator import generate_dataset

    points = generate_dataset(dataset, n_samples)
    if not points:
        raise ValueError(f"Unknown or non-generated dataset: {dataset}")

    df = pd.DataFrame([{"x": p.x, "y": p.y} for p in points])
    if out:
        df.to_csv(out, index=False)
        print(f"Wrote {len(df)} points to {out}")
    else:
        print(df.head(10).to_string(index=False))
        print(f"... {len(df)} points total")


def analyze(
    dataset: str = "Moons",
    csv_path: Optional[str] = None,
    *,
    n_samples: int = DEFAULT_N_SAMPLES,
    k: int = 2,
    linkage: str = "ward",
    eps: float = 0.5,
    drop_last_column: bool = True,
    with_commentary: bool = True,
) -> None:
    """Run one analysis and print the results.

    Args:
        dataset: Dataset type name (ignored when csv_path is given)
        csv_path: CSV file to analyze instead of a generated dataset
        n_samples: Number of points for generated datasets
        k: n_clusters for spectral, k-means and agglomerative
        linkage: Agglomerative linkage (reported only)
        eps: DBSCAN eps (reported only)
        drop_last_column: Drop the trailing label column of the CSV
        with_commentary: Ask the LLM for an analysis
    """
    from .clustering.display import format_params
    from .datasets.csv_ingest import read_csv_text
    from .models.cluster import AlgorithmParameters, DatasetType
    from .models.run import AnalysisRequest, RunStatus
    from .orchestrator import AnalysisOrchestrator

    params = AlgorithmParameters.model_validate({
        "spectral": {"n_clusters": k},
        "kmeans": {"n_clusters": k},
        "agglomerative": {"n_clusters": k, "linkage": linkage},
        "dbscan": {"eps": eps},
    })

    if csv_path:
        path = Path(csv_path)
        request = AnalysisRequest(
            dataset_type=DatasetType.CUSTOM,
            params=params,
            drop_last_column=drop_last_column,
            file_name=path.name,
            file_contents=read_csv_text(path),
            with_commentary=with_commentary,
        )
    else:
        request = AnalysisRequest(
            dataset_type=DatasetType(dataset),
            params=params,
            n_samples=n_samples,
            with_commentary=with_commentary,
        )

    if with_commentary and not has_openai():
        print("Note: OPENAI_API_KEY not set; commentary will report the missing key.")

    state = asyncio.run(AnalysisOrchestrator().run(request))
    if state.status == RunStatus.FAILED:
        raise ValueError(state.error)

    print(f"\nDataset: {state.dataset_name} ({len(state.points)} points)\n")
    for result in state.results:
        m = result.metrics
        print(f"[{result.algorithm}] {format_params(result.params)}")
        print(f"    clusters: {result.n_clusters}  noise: {result.noise_count}")
        print(
            f"    silhouette={m.silhouette:.3f}  "
            f"calinski_harabasz={m.calinski_harabasz:.3f}  "
            f"davies_bouldin={m.davies_bouldin:.3f}"
        )
    if state.commentary:
        print("\n--- AI Analysis ---\n")
        print(state.commentary)
    print()


def serve(port: int = 8000, reload: bool = False) -> None:
    """Start the FastAPI backend server.

    Args:
        port: Port to run on
        reload: Enable auto-reload for development
    """
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Run: pip install uvicorn")
        sys.exit(1)

    print(f"Starting Clustering Visualizer API on http://localhost:{port}")
    uvicorn.run(
        "clusterviz.api.main:app",
        host="0.0.0.0",
        port=port,
        reload=reload,
    )


def models() -> None:
    """Print the LLM models available to the configured key."""
    from .commentary import list_available_models

    names = list_available_models()
    print("Available models:")
    for name in names:
        print(f"- {name}")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Clustering Visualizer - compare clustering algorithms on 2-D data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Preview a generated dataset
  python -m clusterviz.pipeline generate --dataset Blobs

  # Analyze circles without AI commentary
  python -m clusterviz.pipeline analyze --dataset Circles --no-commentary

  # Analyze a CSV whose last column is numeric data, not a label
  python -m clusterviz.pipeline analyze --csv points.csv --keep-last-column

  # Start FastAPI backend
  python -m clusterviz.pipeline serve
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate a synthetic dataset")
    gen_parser.add_argument(
        "--dataset", "-d", type=str, default="Moons",
        help="Dataset type: Moons, Blobs or Circles (default: Moons)",
    )
    gen_parser.add_argument("--n-samples", "-n", type=int, default=DEFAULT_N_SAMPLES, help="Number of points")
    gen_parser.add_argument("--out", "-o", type=str, default=None, help="Write points to this CSV file")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Run the four algorithms on a dataset")
    analyze_parser.add_argument("--dataset", "-d", type=str, default="Moons", help="Dataset type (default: Moons)")
    analyze_parser.add_argument("--csv", type=str, default=None, help="CSV file to analyze instead")
    analyze_parser.add_argument("--n-samples", "-n", type=int, default=DEFAULT_N_SAMPLES, help="Number of points")
    analyze_parser.add_argument("--k", "-k", type=int, default=2, help="Number of clusters (default: 2)")
    analyze_parser.add_argument(
        "--linkage", type=str, default="ward",
        choices=["ward", "complete", "average", "single"],
        help="Agglomerative linkage (default: ward)",
    )
    analyze_parser.add_argument("--eps", type=float, default=0.5, help="DBSCAN eps (default: 0.5)")
    analyze_parser.add_argument(
        "--keep-last-column", action="store_true",
        help="Do not drop the last CSV column",
    )
    analyze_parser.add_argument("--no-commentary", action="store_true", help="Skip AI commentary")

    # FastAPI serve command
    serve_parser = subparsers.add_parser("serve", help="Start FastAPI backend")
    serve_parser.add_argument("--port", "-p", type=int, default=8000, help="Port (default: 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    # Models command
    subparsers.add_parser("models", help="List LLM models available for commentary")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "generate":
            generate(args.dataset, n_samples=args.n_samples, out=args.out)
        elif args.command == "analyze":
            analyze(
                args.dataset,
                args.csv,
                n_samples=args.n_samples,
                k=args.k,
                linkage=args.linkage,
                eps=args.eps,
                drop_last_column=not args.keep_last_column,
                with_commentary=not args.no_commentary,
            )
        elif args.command == "serve":
            serve(port=args.port, reload=args.reload)
        elif args.command == "models":
            models()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
