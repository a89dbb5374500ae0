"""Report formatting for discovery results."""

import json
from typing import Iterable, List

from .records import DiscoveryReport, ExtractionRecord, ReadError

RULE = "━" * 70


def _names(names: Iterable[str]) -> str:
    return ", ".join(sorted(names))


def _header(title: str) -> List[str]:
    return [title, RULE]


def format_read_errors(errors: List[ReadError]) -> str:
    """Format files that could not be read."""
    return "\n".join(f"⚠️  {error}" for error in errors)


def format_file_analysis(records: List[ExtractionRecord]) -> str:
    """Format the per-file breakdown of decorators and module definitions."""
    lines = [""] + _header("📋 DETAILED ANALYSIS BY FILE:")
    for record in records:
        lines.append(f"📁 {record.file_path}")
        if record.used_names:
            lines.append(f"   🎯 Decorators: {_names(record.used_names)}")
        if record.defined_names:
            lines.append(f"   ⚙️  Modules:    {_names(record.defined_names)}")
        lines.append("")
    return "\n".join(lines)


def format_overview(report: DiscoveryReport) -> str:
    """Format summary counts and the properly configured throttlers."""
    lines = _header("📊 THROTTLER ANALYSIS SUMMARY:")
    lines.append(f"✅ Total discovered throttlers: {len(report.total_names)}")
    lines.append(f"🎯 Used in decorators: {len(report.used_names)}")
    lines.append(f"⚙️  Defined in modules: {len(report.defined_names)}")
    lines.append(f"✅ Properly used & defined: {len(report.reconciled)}")
    lines.append("")

    if report.reconciled:
        lines.append("✅ PROPERLY CONFIGURED THROTTLERS:")
        lines.append(f"   {_names(report.reconciled)}")
        lines.append(
            "   These throttlers are correctly defined in modules and used in decorators."
        )
        lines.append("")
    return "\n".join(lines)


def format_multi_module(report: DiscoveryReport) -> str:
    """Format the list of registering files when there is more than one."""
    module_records = report.module_records
    if len(module_records) <= 1:
        return ""

    lines = [
        "🔄 MULTI-MODULE SETUP DETECTED:",
        "   Multiple files define throttler modules. Ensure all required throttlers",
        "   are available in the modules where they will be used.",
        "",
    ]
    for record in module_records:
        lines.append(f"   📁 {record.file_path}: [{_names(record.defined_names)}]")
    lines.append("")
    return "\n".join(lines)


def format_warnings(report: DiscoveryReport) -> str:
    """Format missing and unused module definitions."""
    lines: List[str] = []
    if report.used_only:
        lines.append("⚠️  MISSING MODULE DEFINITIONS:")
        lines.append(f"   {_names(report.used_only)}")
        lines.append(
            "   These throttlers are used in decorators but not defined in any "
            "ThrottlerModule.for_root()."
        )
        lines.append(
            "   Add them to your module configuration or they may not work properly."
        )
        lines.append("")

    if report.defined_only:
        lines.append("💡 UNUSED MODULE DEFINITIONS:")
        lines.append(f"   {_names(report.defined_only)}")
        lines.append(
            "   These throttlers are defined in modules but never used in decorators."
        )
        lines.append(
            "   They will be automatically skipped by selective decorators "
            "(this is expected)."
        )
        lines.append("")
    return "\n".join(lines)


def format_issues(report: DiscoveryReport) -> str:
    """Format cross-module issues with suggested solutions."""
    if not report.issues:
        return ""

    lines = _header("❌ CROSS-MODULE THROTTLER ISSUES DETECTED:")
    for issue in report.issues:
        lines.append(f"📁 {issue.file}")
        lines.append(f"   Module: {issue.scope_label}")
        lines.append(
            f"   Available throttlers: [{_names(issue.available_names) or 'none'}]"
        )
        lines.append(f"   Used throttlers: [{_names(issue.used_names)}]")
        lines.append(f"   ❌ Unavailable: [{_names(issue.unavailable_names)}]")
        lines.append("   💡 These throttlers will not work properly!")
        lines.append("")

    lines.append("🔧 SOLUTIONS:")
    lines.append("   1. Move all throttler definitions to the root module (recommended)")
    lines.append("   2. Add missing throttlers to the respective modules")
    lines.append("   3. Use only throttlers available in each module")
    lines.append("")
    return "\n".join(lines)


def format_generated(paths: Iterable[str], name_count: int) -> str:
    """Format the list of generated artifacts."""
    lines = _header("🎉 CODE GENERATION COMPLETED:")
    lines.extend(f"📝 {path}" for path in sorted(paths))
    lines.append("")
    lines.append(
        f"🚀 Generated decorators with {name_count} throttler names ready for use!"
    )
    return "\n".join(lines)


def format_text(report: DiscoveryReport, verbose: bool = True) -> str:
    """Format a full human-readable report.

    Args:
        report: Discovery report
        verbose: Include the informational sections

    Returns:
        Formatted text report
    """
    sections = []
    if verbose:
        sections.append(format_file_analysis(report.records))
        sections.append(format_overview(report))
    sections.append(format_warnings(report))
    if verbose:
        sections.append(format_multi_module(report))
    sections.append(format_issues(report))
    return "\n".join(section for section in sections if section)


def format_json(report: DiscoveryReport) -> str:
    """Format a report as JSON for CI/CD.

    Args:
        report: Discovery report

    Returns:
        JSON string
    """
    output = {
        "summary": {
            "total": len(report.total_names),
            "used": len(report.used_names),
            "defined": len(report.defined_names),
            "reconciled": len(report.reconciled),
            "issues": len(report.issues),
        },
        "names": list(report.total_names),
        "missing_definitions": sorted(report.used_only),
        "unused_definitions": sorted(report.defined_only),
        "files": [
            {
                "file": record.file_path,
                "decorators": sorted(record.used_names),
                "modules": sorted(record.defined_names),
            }
            for record in report.records
        ],
        "issues": [
            {
                "file": issue.file,
                "scope": issue.owning_scope.directory if issue.owning_scope else None,
                "available": sorted(issue.available_names),
                "used": sorted(issue.used_names),
                "unavailable": sorted(issue.unavailable_names),
            }
            for issue in report.issues
        ],
    }
    return json.dumps(output, indent=2)


def format_summary(report: DiscoveryReport) -> str:
    """Format concise one-line summary.

    Args:
        report: Discovery report

    Returns:
        Summary string
    """
    parts = [
        f"{len(report.records)} files",
        f"{len(report.total_names)} throttlers",
    ]
    if report.reconciled:
        parts.append(f"✅ {len(report.reconciled)} configured")
    if report.used_only:
        parts.append(f"⚠️  {len(report.used_only)} missing")
    if report.defined_only:
        parts.append(f"💡 {len(report.defined_only)} unused")
    if report.issues:
        parts.append(f"❌ {len(report.issues)} cross-module issues")
    return " | ".join(parts)
