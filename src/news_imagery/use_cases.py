"""Business logic use cases."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from news_imagery.core import (
    Article,
    DecisionCache,
    DecisionTier,
    EmptyImageLibraryError,
    ImageCurator,
    ImageDecision,
    ImageLibrary,
    SelectionContext,
)
from news_imagery.core.brand_matcher import find_brand_matches, select_brand_image
from news_imagery.core.cache_policy import is_valid_cached_decision, normalize_cache_key
from news_imagery.core.classifier import (
    MetadataTable,
    filter_brand_safe,
    filter_generic_images,
    filter_subject_images,
    is_brand_by_filename,
    is_brand_safe,
    is_generic_image,
)
from news_imagery.core.hashing import HashFn, deterministic_pick, simple_hash
from news_imagery.core.keywords import extract_keywords
from news_imagery.core.policy import is_generic_article
from news_imagery.core.scorer import rank_candidates

logger = logging.getLogger(__name__)

# Neutral defaults tried, in order, when no tier found anything.
BUILTIN_FALLBACKS = (
    "default.jpg",
    "default.webp",
    "news-default.jpg",
    "tech-default.jpg",
)


def _prefer_unused(pool: list[str], context: SelectionContext) -> list[str]:
    unused = [filename for filename in pool if not context.is_used(filename)]
    return unused or pool


class ImageSelector:
    """Pick exactly one image per article through prioritized tiers.

    Tiers run strictly in order and the first one producing a candidate wins:
    semantic curator, brand match, keyword score, generic pool, hard fallback.
    Only the semantic tier touches the network; everything after it is a pure
    function of the article, the library and the selection context.
    """

    def __init__(
        self,
        curator: Optional[ImageCurator] = None,
        cache: Optional[DecisionCache] = None,
        metadata: Optional[MetadataTable] = None,
        curator_timeout: float = 5.0,
        strict_empty_library: bool = False,
        hash_fn: HashFn = simple_hash,
    ) -> None:
        self.curator = curator
        self.cache = cache
        self.metadata = metadata or {}
        self.curator_timeout = curator_timeout
        self.strict_empty_library = strict_empty_library
        self.hash_fn = hash_fn

    async def get_article_image(
        self,
        article: Article,
        library: list[str],
        context: Optional[SelectionContext] = None,
    ) -> ImageDecision:
        """Cached decision if still valid, otherwise a fresh selection."""
        if context is None:
            context = SelectionContext()

        if not library:
            return await self.select_image(article, library, context)

        cached = self.get_cached_image(article, library)
        if cached is not None:
            context.mark_used(cached.filename)
            return cached

        decision = await self.select_image(article, library, context)

        if self.cache is not None and decision.tier != DecisionTier.PLACEHOLDER:
            try:
                self.cache.set(normalize_cache_key(article.title), decision)
            except Exception as e:
                logger.warning(f"Could not cache decision for {article.title!r}: {e}")

        return decision

    def get_cached_image(self, article: Article, library: list[str]) -> Optional[ImageDecision]:
        """Return the cached decision if it passes version and brand-safety checks.

        A decision pointing at a file no longer in ``library`` is a miss.
        """
        if self.cache is None:
            return None

        key = normalize_cache_key(article.title)
        try:
            cached = self.cache.get(key)
        except Exception as e:
            logger.warning(f"Decision cache read failed for {key!r}: {e}")
            return None

        if cached is None:
            return None

        if not is_valid_cached_decision(cached, is_generic_article(article.title, article.description)):
            logger.debug(
                f"Discarding cached decision for {key!r}: "
                f"{cached.filename} (policy v{cached.policy_version})"
            )
            return None

        if cached.filename not in library:
            logger.debug(f"Discarding cached decision for {key!r}: {cached.filename} left the library")
            return None

        return cached

    async def select_image(
        self,
        article: Article,
        library: list[str],
        context: Optional[SelectionContext] = None,
    ) -> ImageDecision:
        """
        Run the tiers for one article.

        Args:
            article: Article metadata
            library: Candidate filenames, sorted
            context: Filenames already used in this render; updated in place

        Returns:
            The decision; the placeholder when the library is empty

        Raises:
            EmptyImageLibraryError: Library is empty and strict mode is on.
        """
        if context is None:
            context = SelectionContext()

        if not library:
            if self.strict_empty_library:
                raise EmptyImageLibraryError("Image library is empty, cannot select an image")
            logger.error("Image library is empty, serving placeholder")
            return ImageDecision.placeholder("Image library is empty")

        is_generic = is_generic_article(article.title, article.description)

        decision = await self._semantic_tier(article, library, context, is_generic)
        if decision is None:
            decision = self._brand_tier(article, library, is_generic)
        if decision is None:
            decision = self._keyword_tier(article, library, context, is_generic)
        if decision is None:
            decision = self._generic_tier(article, library, context)
        if decision is None:
            decision = self._hard_fallback(article, library)

        decision = self.finalize(decision, article, library, is_generic)

        if decision.tier != DecisionTier.PLACEHOLDER:
            context.mark_used(decision.filename)

        logger.info(f"[{decision.tier.value}] {article.title!r} -> {decision.filename} ({decision.reason})")
        return decision

    def finalize(
        self,
        decision: ImageDecision,
        article: Article,
        library: list[str],
        is_generic: bool,
    ) -> ImageDecision:
        """Last brand-safety check before a decision leaves the selector.

        Articles that name no brand must not get a brand image, whatever tier
        produced it. A substitute comes from the brand-safe generic pool, then
        from any brand-safe image.
        """
        if not is_generic or decision.tier == DecisionTier.PLACEHOLDER:
            return decision
        if is_brand_safe(decision.filename, self.metadata):
            return decision

        logger.warning(
            f"Brand image {decision.filename} selected for generic article "
            f"{article.title!r} by {decision.tier.value} tier, substituting"
        )

        safe = filter_brand_safe(library, self.metadata)
        pool = filter_generic_images(safe) or safe
        substitute = deterministic_pick(article.title, pool, self.hash_fn)

        if substitute is None:
            logger.error(
                f"No brand-safe image available for {article.title!r}; "
                "the library needs generic-safe images"
            )
            return ImageDecision.placeholder("No brand-safe image in library")

        return ImageDecision.for_filename(
            substitute,
            decision.tier,
            f"Brand-safe substitute for {decision.filename}",
        )

    async def _semantic_tier(
        self,
        article: Article,
        library: list[str],
        context: SelectionContext,
        is_generic: bool,
    ) -> Optional[ImageDecision]:
        if self.curator is None:
            return None

        pool = filter_brand_safe(library, self.metadata) if is_generic else list(library)
        pool = _prefer_unused(pool, context)
        if not pool:
            return None

        try:
            answer = await asyncio.wait_for(
                self.curator.curate(article.title, article.category or "", pool),
                timeout=self.curator_timeout,
            )
        except asyncio.TimeoutError:
            logger.debug(f"Curator timed out after {self.curator_timeout}s for {article.title!r}")
            return None
        except Exception as e:
            logger.debug(f"Curator failed for {article.title!r}: {type(e).__name__}: {e}")
            return None

        if answer is None:
            logger.debug(f"Curator had no opinion for {article.title!r}")
            return None
        if answer not in pool:
            logger.debug(f"Curator answer {answer!r} is not an eligible image")
            return None

        return ImageDecision.for_filename(answer, DecisionTier.SEMANTIC, "Selected by semantic curator")

    def _brand_tier(
        self, article: Article, library: list[str], is_generic: bool
    ) -> Optional[ImageDecision]:
        if is_generic:
            return None

        matches = find_brand_matches(article.title, library)
        chosen = select_brand_image(article.title, matches, self.hash_fn)
        if chosen is None:
            return None

        return ImageDecision.for_filename(
            chosen,
            DecisionTier.BRAND,
            f"Brand named in title ({len(matches)} matching image(s))",
        )

    def _keyword_tier(
        self,
        article: Article,
        library: list[str],
        context: SelectionContext,
        is_generic: bool,
    ) -> Optional[ImageDecision]:
        candidates = filter_subject_images(library, article.category)
        if is_generic:
            candidates = filter_brand_safe(candidates, self.metadata)

        title_keywords = extract_keywords(article.title)
        best, top = rank_candidates(candidates, title_keywords, article.category, context.used_filenames)
        if not top or best <= 0:
            return None

        chosen = deterministic_pick(article.title, top, self.hash_fn)
        return ImageDecision.for_filename(
            chosen,
            DecisionTier.KEYWORD,
            f"Best keyword score {best:g} among {len(top)} tied candidate(s)",
            score=best,
        )

    def _generic_tier(
        self, article: Article, library: list[str], context: SelectionContext
    ) -> Optional[ImageDecision]:
        pool = filter_brand_safe(filter_generic_images(library), self.metadata)
        pool = _prefer_unused(pool, context)
        chosen = deterministic_pick(article.title, pool, self.hash_fn)
        if chosen is None:
            return None

        return ImageDecision.for_filename(
            chosen, DecisionTier.GENERIC, f"Generic fallback from {len(pool)} brand-safe image(s)"
        )

    def _hard_fallback(self, article: Article, library: list[str]) -> ImageDecision:
        for filename in BUILTIN_FALLBACKS:
            if filename in library:
                return ImageDecision.for_filename(filename, DecisionTier.HARD_FALLBACK, "Built-in default image")

        chosen = deterministic_pick(article.title, library, self.hash_fn)
        return ImageDecision.for_filename(chosen, DecisionTier.HARD_FALLBACK, "No generic images, picked from whole library")


class ArticleImageService:
    """Assign images to every article of one page render."""

    def __init__(self, selector: ImageSelector, library: ImageLibrary) -> None:
        self.selector = selector
        self.library = library

    async def assign_images(self, articles: list[Article]) -> list[ImageDecision]:
        """Select images in article order with a fresh selection context.

        Order matters: earlier articles claim images first and later ones pay
        the reuse penalty.
        """
        library = self.library.list_images()
        context = SelectionContext()

        decisions = []
        for article in articles:
            decisions.append(await self.selector.get_article_image(article, library, context))
        return decisions


@dataclass
class AuditReport:
    """Result of a brand-safety audit of the image library."""

    total_files: int
    metadata_rows: int
    brand_safe_generic: list[str]
    brand_images: list[str]
    other_images: list[str]
    min_brand_safe_generic: int
    missing_from_metadata: list[str] = field(default_factory=list)
    metadata_without_file: list[str] = field(default_factory=list)
    marker_conflicts: list[str] = field(default_factory=list)
    restricted_generic: list[str] = field(default_factory=list)

    @property
    def has_enough_generic(self) -> bool:
        return len(self.brand_safe_generic) >= self.min_brand_safe_generic

    @property
    def passed(self) -> bool:
        return self.has_enough_generic

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "total_files": self.total_files,
            "metadata_rows": self.metadata_rows,
            "min_brand_safe_generic": self.min_brand_safe_generic,
            "brand_safe_generic": self.brand_safe_generic,
            "brand_images": self.brand_images,
            "other_images": self.other_images,
            "missing_from_metadata": self.missing_from_metadata,
            "metadata_without_file": self.metadata_without_file,
            "marker_conflicts": self.marker_conflicts,
            "restricted_generic": self.restricted_generic,
        }


class LibraryAuditService:
    """Check that the library can serve articles that name no brand."""

    def __init__(self, min_brand_safe_generic: int = 20) -> None:
        self.min_brand_safe_generic = min_brand_safe_generic

    def audit(self, library: list[str], metadata: Optional[MetadataTable] = None) -> AuditReport:
        metadata = metadata or {}
        files = set(library)

        brand_safe_generic = filter_brand_safe(filter_generic_images(library), metadata)
        brand_images = [name for name in library if not is_brand_safe(name, metadata)]
        classified = set(brand_safe_generic) | set(brand_images)
        other_images = [name for name in library if name not in classified]

        report = AuditReport(
            total_files=len(library),
            metadata_rows=len(metadata),
            brand_safe_generic=brand_safe_generic,
            brand_images=brand_images,
            other_images=other_images,
            min_brand_safe_generic=self.min_brand_safe_generic,
        )

        if metadata:
            report.missing_from_metadata = [name for name in library if name not in metadata]
            report.metadata_without_file = sorted(name for name in metadata if name not in files)
            # Filename says brand, metadata says clean: the filename wins
            report.marker_conflicts = [
                name for name in library
                if is_brand_by_filename(name) and name in metadata and not metadata[name].restricts_brand_use
            ]
            report.restricted_generic = [
                name for name in library
                if is_generic_image(name) and name in metadata and metadata[name].restricts_brand_use
            ]

        return report
