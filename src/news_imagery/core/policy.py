"""Selection policy: version tag, public paths and article classification."""

import re

# Bump on any change to scoring weights, tie-breaking or brand-safety rules.
# Cached decisions carrying another version are discarded.
POLICY_VERSION = 3

PUBLIC_PREFIX = "/assets/images/all"

PLACEHOLDER_FILENAME = "placeholder.webp.svg"
PLACEHOLDER_IMAGE = "/assets/images/defaults/placeholder.webp.svg"

BRAND_KEYWORDS = [
    # AI labs and products
    "openai", "chatgpt", "gpt", "dall-e", "sora", "anthropic", "claude",
    "google", "gemini", "deepmind", "bard", "microsoft", "copilot", "bing",
    "meta", "facebook", "instagram", "whatsapp", "llama", "mistral", "xai",
    "grok", "perplexity", "hugging face", "huggingface", "midjourney",
    "stability ai", "cohere",
    # Big tech and hardware
    "apple", "iphone", "amazon", "aws", "alexa", "nvidia", "intel", "amd",
    "ibm", "samsung", "tesla", "spacex", "netflix", "oracle", "salesforce",
    "adobe", "tiktok", "bytedance", "baidu", "alibaba", "tencent", "deepseek",
    "doordash", "uber", "spotify", "youtube", "twitter",
    # Crypto
    "bitcoin", "btc", "ethereum", "eth", "solana", "dogecoin", "coinbase",
    "binance",
]

# Whole words, but a trailing version number is allowed ("gpt4", "llama3")
_BRAND_PATTERNS = [
    re.compile(r"(?<![a-z0-9])" + re.escape(keyword) + r"(?![a-z])")
    for keyword in BRAND_KEYWORDS
]


def is_generic_article(title: str, description: str = "") -> bool:
    """Return True unless the article explicitly names a known brand or product."""
    text = f"{title or ''} {description or ''}".lower()
    return not any(pattern.search(text) for pattern in _BRAND_PATTERNS)


def with_public_path(filename: str) -> str:
    """Map a library filename to the path the site serves it from."""
    return f"{PUBLIC_PREFIX}/{filename}"


def is_local_image(path: str) -> bool:
    """True for site-relative paths, False for anything pointing off-site."""
    if not path:
        return False
    return path.startswith("/") and not path.startswith("//")
