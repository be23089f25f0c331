"""CLI entry point for news imagery."""

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer

from news_imagery.adapters.cache import YamlDecisionCache
from news_imagery.adapters.library import FilesystemImageLibrary
from news_imagery.adapters.llm import ClaudeCurator
from news_imagery.adapters.metadata import load_image_metadata
from news_imagery.config import Settings, get_settings
from news_imagery.core import Article, EmptyImageLibraryError
from news_imagery.core.policy import is_generic_article
from news_imagery.use_cases import ImageSelector, LibraryAuditService

app = typer.Typer(help="Deterministic image selection for news articles.")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_settings(config: Path, images_dir: Optional[Path]) -> Settings:
    settings = get_settings(config)
    if images_dir is not None:
        settings.paths.images_dir = images_dir
    return settings


@app.command()
def select(
    title: str,
    description: str = typer.Option("", help="Article description"),
    category: str = typer.Option("", help="Article category, e.g. 'AI Economy'"),
    images_dir: Optional[Path] = typer.Option(None, help="Override the image directory"),
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
    no_ai: bool = typer.Option(False, "--no-ai", help="Skip the semantic curator"),
    no_cache: bool = typer.Option(False, "--no-cache", help="Bypass the decision cache"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every tier"),
) -> None:
    """Select an image for one article and print the decision."""
    _setup_logging(verbose)
    settings = _load_settings(config, images_dir)

    curator = None
    if settings.curator_enabled and not no_ai:
        curator = ClaudeCurator(settings)
    elif not settings.anthropic_api_key and not no_ai:
        print("⚠️  ANTHROPIC_API_KEY not set - semantic curation disabled")

    selector = ImageSelector(
        curator=curator,
        cache=None if no_cache else YamlDecisionCache(settings.cache_dir),
        metadata=load_image_metadata(settings.metadata_csv),
        curator_timeout=settings.curator_timeout,
        strict_empty_library=settings.strict_empty_library,
    )
    library = FilesystemImageLibrary(settings.images_dir).list_images()
    article = Article(title=title, description=description, category=category)

    try:
        decision = asyncio.run(selector.get_article_image(article, library))
    except EmptyImageLibraryError as e:
        print(f"❌ {e} ({settings.images_dir})")
        raise typer.Exit(code=1)

    print(f"📰 {article.title}")
    print(f"  • Generic article: {'yes' if is_generic_article(title, description) else 'no'}")
    print(f"  • Library size: {len(library)}")
    print(f"  • Tier: {decision.tier.value}")
    print(f"  • Image: {decision.image}")
    print(f"  • Reason: {decision.reason}")
    if decision.score:
        print(f"  • Score: {decision.score:g}")


@app.command()
def audit(
    images_dir: Optional[Path] = typer.Option(None, help="Override the image directory"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Override the metadata CSV"),
    report: bool = typer.Option(False, "--report", help="Write a JSON report to the reports dir"),
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
) -> None:
    """Audit the image library for brand-safe fallback coverage."""
    _setup_logging(False)
    settings = _load_settings(config, images_dir)

    library = FilesystemImageLibrary(settings.images_dir).list_images()
    metadata = load_image_metadata(csv_path or settings.metadata_csv)
    result = LibraryAuditService(settings.selection.min_brand_safe_generic).audit(library, metadata)

    print("\n" + "=" * 60)
    print("🔒 BRAND-SAFE FALLBACK AUDIT")
    print("=" * 60)
    print(f"📁 Files in folder: {result.total_files}")
    print(f"📊 Metadata rows: {result.metadata_rows}")
    print(f"\n✅ Brand-safe generic images: {len(result.brand_safe_generic)}")
    for name in result.brand_safe_generic[:10]:
        print(f"   • {name}")
    print(f"\n🚫 Brand images: {len(result.brand_images)}")
    for name in result.brand_images[:10]:
        print(f"   • {name}")
    print(f"\n📦 Other images: {len(result.other_images)}")

    if result.missing_from_metadata:
        print(f"\n⚠️  Files without metadata: {len(result.missing_from_metadata)}")
    if result.metadata_without_file:
        print(f"⚠️  Metadata rows without file: {len(result.metadata_without_file)}")
    for name in result.marker_conflicts:
        print(f"⚠️  {name}: metadata says no logo, brand- prefix wins")
    for name in result.restricted_generic:
        print(f"⚠️  {name}: generic marker but metadata flags a logo/trademark, excluded")

    if report:
        settings.reports_dir.mkdir(parents=True, exist_ok=True)
        report_path = settings.reports_dir / "image-audit-report.json"
        report_path.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"\n📁 Report saved to {report_path}")

    print("\n" + "=" * 60)
    if result.passed:
        print("✅ ALL CHECKS PASSED")
        return

    print(
        f"❌ INSUFFICIENT brand-safe generic images: "
        f"{len(result.brand_safe_generic)} < {result.min_brand_safe_generic}"
    )
    raise typer.Exit(code=1)


@app.command("cache-stats")
def cache_stats(
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
) -> None:
    """Show decision cache statistics."""
    settings = get_settings(config)
    stats = YamlDecisionCache(settings.cache_dir).get_stats()

    print(f"💾 Decision cache: {settings.cache_dir}")
    print(f"  • Entries: {stats['size']}")
    print(f"  • Policy version: {stats['policy_version']}")
    print(f"  • Stale entries: {stats['stale_count']}")
    print(f"  • Brand images: {stats['brand_image_count']}")
    print(f"  • Generic images: {stats['generic_image_count']}")
    for entry in stats["sample_entries"]:
        print(f"    {entry['key'][:60]} -> {entry['filename']}")


@app.command("clear-cache")
def clear_cache(
    stale_only: bool = typer.Option(False, "--stale-only", help="Only drop entries from older policies"),
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
) -> None:
    """Clear the decision cache."""
    settings = get_settings(config)
    cache = YamlDecisionCache(settings.cache_dir)

    if stale_only:
        removed = cache.prune_stale()
        print(f"✓ Removed {removed} stale entries")
    else:
        cache.clear()
        print(f"✓ Cache cleared: {settings.cache_dir}")


if __name__ == "__main__":
    app()
