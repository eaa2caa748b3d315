"""Resource transforms applied by the pre-processing hooks."""

from .pipeline import Transform, TransformPipeline
from .title import TitleStripper, remove_first_title
from .committers import CommitterExtractor, extract_committers
from .last_modified import LastModifiedExtractor, extract_last_modified
from .nav import NavRewriter, filter_nav, rewrite_links
from .sanitize import AstSanitizer, remove_position, sanitize_payload

__all__ = [
    "AstSanitizer",
    "CommitterExtractor",
    "LastModifiedExtractor",
    "NavRewriter",
    "TitleStripper",
    "Transform",
    "TransformPipeline",
    "extract_committers",
    "extract_last_modified",
    "filter_nav",
    "remove_first_title",
    "remove_position",
    "rewrite_links",
    "sanitize_payload",
]
