"""Thread domain service."""

from dataclasses import dataclass, field
from uuid import uuid4

import logfire

from chatter.domain.error import NotFoundError
from chatter.domain.model import Thread
from chatter.domain.repository import ThreadRepository
from chatter.domain.value import PageRequest, ThreadId, UserId, utcnow

from .user_service import AuthorSummary, UserService


@dataclass
class ThreadNode:
    """A thread with its references resolved.

    ``author`` is None only when the author record no longer resolves.
    ``children`` holds the populated replies, down to the depth requested;
    ``thread.children_ids`` still lists every reply.
    """

    thread: Thread
    author: AuthorSummary | None
    children: list["ThreadNode"] = field(default_factory=list)


@dataclass
class ThreadPage:
    """One page of the top-level feed."""

    threads: list[ThreadNode]
    total: int
    is_next: bool


class ThreadService:
    """Domain service for thread operations."""

    def __init__(
        self, thread_repository: ThreadRepository, user_service: UserService
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            user_service: User domain service
        """
        self.thread_repository = thread_repository
        self.user_service = user_service

    async def create_thread(self, text: str, author_id: UserId) -> Thread:
        """Start a new top-level thread.

        Saves the thread, then appends it to the author's thread list. Both
        writes belong to the caller's unit of work.

        Args:
            text: Thread body
            author_id: Author user ID

        Returns:
            Created thread

        Raises:
            NotFoundError: If the author does not exist
        """
        with logfire.span("thread_service.create_thread", author_id=str(author_id)):
            await self.user_service.get_by_id(author_id)  # Raises NotFoundError

            thread = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                parent_id=None,
                children_ids=[],
                community_id=None,
                created_at=utcnow(),
            )
            saved = await self.thread_repository.save(thread)
            await self.user_service.append_thread(author_id, saved.id)

            logfire.info(
                "Thread created", thread_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def add_reply(
        self, parent_id: ThreadId, text: str, author_id: UserId
    ) -> Thread:
        """Reply to an existing thread.

        Args:
            parent_id: Thread being replied to
            text: Reply body
            author_id: Author user ID

        Returns:
            Created reply

        Raises:
            NotFoundError: If the parent thread or the author does not exist
        """
        with logfire.span(
            "thread_service.add_reply",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            parent = await self.thread_repository.find_by_id(parent_id)
            if not parent:
                logfire.error("Parent thread not found", parent_id=str(parent_id))
                raise NotFoundError("Thread", str(parent_id))

            await self.user_service.get_by_id(author_id)  # Raises NotFoundError

            reply = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                parent_id=parent.id,
                children_ids=[],
                community_id=None,
                created_at=utcnow(),
            )
            saved = await self.thread_repository.save(reply)
            await self.thread_repository.append_child(parent.id, saved.id)

            logfire.info(
                "Reply added", reply_id=str(saved.id), parent_id=str(parent.id)
            )
            return saved

    async def list_top_level(self, page: PageRequest) -> ThreadPage:
        """List the feed of top-level threads, newest first.

        Each thread carries its author and one level of replies, each reply
        with its own author.

        Args:
            page: Page to return

        Returns:
            The page of threads and whether more pages exist
        """
        with logfire.span(
            "thread_service.list_top_level",
            page=page.page,
            page_size=page.page_size,
        ):
            total = await self.thread_repository.count_top_level()
            threads = await self.thread_repository.find_top_level(
                limit=page.page_size, offset=page.offset
            )
            nodes = await self.populate(threads, reply_depth=1)
            is_next = page.has_next(total, len(threads))

            logfire.info("Threads listed", count=len(nodes), total=total)
            return ThreadPage(threads=nodes, total=total, is_next=is_next)

    async def get_thread_tree(self, thread_id: ThreadId) -> ThreadNode | None:
        """Get a thread with two levels of replies.

        Args:
            thread_id: Thread ID

        Returns:
            The populated thread if found, None otherwise
        """
        with logfire.span("thread_service.get_thread_tree", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if not thread:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                return None

            [node] = await self.populate([thread], reply_depth=2)
            return node

    async def get_threads(
        self, thread_ids: list[ThreadId], reply_depth: int = 0
    ) -> list[ThreadNode]:
        """Get threads by ID, populated, in the order given.

        Args:
            thread_ids: Threads to fetch
            reply_depth: Levels of replies to resolve under each thread

        Returns:
            Populated threads
        """
        threads = await self.thread_repository.find_by_ids(thread_ids)
        return await self.populate(threads, reply_depth=reply_depth)

    async def get_activity(self, user_id: UserId) -> list[ThreadNode]:
        """Replies other users made to a user's threads, newest first.

        Args:
            user_id: The user whose threads were replied to

        Returns:
            Replies with their author resolved
        """
        with logfire.span("thread_service.get_activity", user_id=str(user_id)):
            own_threads = await self.thread_repository.find_by_author(user_id)
            reply_ids = [
                child_id for thread in own_threads for child_id in thread.children_ids
            ]
            if not reply_ids:
                logfire.info("No activity", user_id=str(user_id))
                return []

            replies = await self.thread_repository.find_by_ids(
                reply_ids, exclude_author_id=user_id
            )
            replies.sort(key=lambda t: t.created_at, reverse=True)

            nodes = await self.populate(replies, reply_depth=0)
            logfire.info("Activity fetched", user_id=str(user_id), count=len(nodes))
            return nodes

    async def populate(
        self, threads: list[Thread], reply_depth: int = 0
    ) -> list[ThreadNode]:
        """Resolve authors and replies for a list of threads.

        Fetches one level of replies per query and every author in a single
        query at the end, rather than one query per thread.

        Args:
            threads: Threads to populate
            reply_depth: Levels of replies to resolve (0 resolves authors only)

        Returns:
            Populated threads in the input order
        """
        levels: list[list[Thread]] = [threads]
        for _ in range(reply_depth):
            child_ids = [cid for thread in levels[-1] for cid in thread.children_ids]
            if not child_ids:
                break
            levels.append(await self.thread_repository.find_by_ids(child_ids))

        replies = {thread.id: thread for level in levels[1:] for thread in level}
        authors = await self.user_service.get_author_summaries(
            [thread.author_id for level in levels for thread in level]
        )

        def build(thread: Thread, depth: int) -> ThreadNode:
            children = []
            if depth < reply_depth:
                children = [
                    build(replies[child_id], depth + 1)
                    for child_id in thread.children_ids
                    if child_id in replies
                ]
            return ThreadNode(
                thread=thread,
                author=authors.get(thread.author_id),
                children=children,
            )

        return [build(thread, 0) for thread in threads]
