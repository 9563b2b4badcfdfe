"""Example of scanning and resolving a HOCON resolution request."""

from pathlib import Path

from secretstore_refs.core.config import ResolutionRequest, load_from_file
from secretstore_refs.core.references import resolve_parameters, scan


def main() -> None:
    """Load a request, list its secret references and resolve them."""
    request_path = str(Path(__file__).parent / "request.conf")
    request = load_from_file(request_path, ResolutionRequest)

    references, keys = scan(request.parameters, request.references)
    print(f"Secret references ({len(references)}):")
    for key in sorted(references):
        print(f"  - {key}")
    print(f"Parameters using them: {', '.join(sorted(keys))}")

    report = resolve_parameters(request.parameters, request.secrets, request.references)
    print(f"\nUpdated parameters: {', '.join(sorted(report.resolved))}")
    for name, leftover in sorted(report.unresolved.items()):
        print(f"  {name}: unresolved {', '.join(leftover)}")


if __name__ == "__main__":
    main()
