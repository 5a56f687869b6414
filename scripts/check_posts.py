import logging
import sys

from lithograph.exceptions import LithographError
from lithograph.repos.content_store import load_content_store
from lithograph.services.posts_service import PostsService
from lithograph.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def check_posts(service: PostsService) -> int:
    """Build the index and render every post, returning how many rendered."""
    posts = service.list_posts()
    for post in posts:
        service.get_post(post.slug)
    return len(posts)


if __name__ == "__main__":
    store = load_content_store(settings.POSTS_DIR, "*.md", name="posts")
    service = PostsService(store, skip_malformed=False)
    try:
        count = check_posts(service)
        logger.info(f"All {count} posts rendered successfully.")
    except LithographError as e:
        logger.error(f"Post check failed: {e}", exc_info=True)
        sys.exit(1)
