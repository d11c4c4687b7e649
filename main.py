import argparse
import logging
import os
import sys
from typing import List, Sequence

from tqdm import tqdm

from build_dsl.config import LocatorSettings
from build_dsl.errors import UnknownDomainObjectError, UnknownProjectError
from build_dsl.exception_handler import ErrorHandler
from build_dsl.project import (
    JavaPluginExtension,
    Project,
    get_module_name,
    is_module,
    load_build,
    snippet_path_string,
    snippet_paths,
)
from build_dsl.snippet import SnippetLocator, SnippetReport


logger = logging.getLogger("build_dsl")


def build_report(project: Project, locator: SnippetLocator) -> SnippetReport:
    """Collect the snippet summary of a single project."""
    paths = snippet_paths(project, locator)
    files = locator.list_snippet_files(paths)
    return SnippetReport(
        project=project.path,
        module_name=get_module_name(project),
        is_module=is_module(project),
        snippet_paths=sorted(paths),
        snippet_files=files,
        snippet_classes=[locator.derive_class_identifier(f) for f in files],
        snippet_path_string=locator.snippet_path_string(paths),
    )


def select_projects(root: Project, selectors: Sequence[str] | None) -> List[Project]:
    """Resolve project selectors by path or by name; default to every Java project."""
    if not selectors:
        return [
            project
            for project in root.all_projects()
            if project.extensions.find_by_type(JavaPluginExtension) is not None
        ]

    selected: List[Project] = []
    for selector in selectors:
        try:
            selected.append(root.project(selector))
            continue
        except UnknownProjectError:
            if selector.startswith(":"):
                raise
        matches = [p for p in root.all_projects() if p.name == selector]
        if not matches:
            raise UnknownProjectError(selector)
        selected.extend(matches)
    return selected


def render_text(reports: Sequence[SnippetReport]) -> str:
    lines: List[str] = []
    for report in reports:
        header = report.project
        if report.is_module:
            header += f" (module {report.module_name})"
        lines.append(header)
        if not report.snippet_paths:
            lines.append("  no snippet directories")
            continue
        lines.append("  snippet paths:")
        lines.extend(f"    {path}" for path in report.snippet_paths)
        lines.append("  snippet classes:")
        lines.extend(
            f"    {class_id}" if class_id.is_derived else f"    {class_id} (unmapped)"
            for class_id in report.snippet_classes
        )
    return "\n".join(lines)


def render_json(reports: Sequence[SnippetReport]) -> str:
    return "[\n" + ",\n".join(report.model_dump_json(indent=2) for report in reports) + "\n]"


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Report documentation snippet directories of a Java build"
    )
    parser.add_argument(
        "path",
        help="Root directory of the build",
    )
    parser.add_argument(
        "--project",
        "-p",
        action="append",
        dest="projects",
        help="Project path (:name) or name to inspect; repeatable (default: all Java projects)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--path-string",
        action="store_true",
        help="Print only the combined snippet path, e.g. for javadoc --snippet-path",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (if not specified, prints to stdout)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: BUILD_DSL_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    settings = LocatorSettings.from_env()
    if args.log_level:
        settings.log_level = args.log_level
    error_handler = ErrorHandler(settings.log_level)

    if not os.path.exists(args.path):
        print(f"Error: Path does not exist: {args.path}", file=sys.stderr)
        sys.exit(1)

    locator = SnippetLocator(settings)

    try:
        root = load_build(args.path, settings=settings)
        projects = select_projects(root, args.projects)
        if args.path_string:
            output_text = snippet_path_string(projects, locator)
            if output_text is None:
                print("❌ No snippet directories found", file=sys.stderr)
                sys.exit(1)
        else:
            reports = [build_report(project, locator) for project in projects]
            output_text = render_json(reports) if args.format == "json" else render_text(reports)
    except KeyboardInterrupt:
        print("\n⚠️ Processing interrupted", file=sys.stderr)
        sys.exit(1)
    except UnknownDomainObjectError as exc:
        error_handler.collect_project_error(exc, args.path, "snippet report")
        print(error_handler.format_error_report(), file=sys.stderr)
        sys.exit(1)
    except OSError as exc:
        error_handler.collect_file_error(exc, exc.filename or args.path, "snippet report")
        print(error_handler.format_error_report(), file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as file_handle:
            file_handle.write(output_text)
        tqdm.write(f"✅ Results saved to: {args.output}", file=sys.stderr)
    else:
        print(output_text)

    logger.debug("Reported %d projects", len(projects))


if __name__ == "__main__":
    main()
