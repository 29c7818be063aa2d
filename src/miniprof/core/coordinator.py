"""Assembly of the payload that bootstraps the results UI.

The payload lists every session the current user has not seen yet,
followed by the session being rendered. Marking sessions viewed is left
to storage once the UI fetches them.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..config import ProfilerSettings
from ..models import IncludesPayload, RenderOptions, Session
from ..services.routing import BasePathResolver, ensure_trailing_slash, static_base_path
from ..services.storage import SessionStorage

logger = logging.getLogger(__name__)

AuthorizationPolicy = Callable[[Any], bool]


class RenderCoordinator:
    """Builds IncludesPayload objects from sessions.

    Args:
        storage: Source of unviewed session ids
        settings: Routing and display defaults (defaults if None)
        authorize: Decides whether a request may see other results;
            every caller is authorized when None
        resolve_base_path: Overrides the route from settings
    """

    def __init__(
        self,
        storage: SessionStorage,
        settings: ProfilerSettings | None = None,
        authorize: AuthorizationPolicy | None = None,
        resolve_base_path: BasePathResolver | None = None,
    ) -> None:
        self.storage = storage
        self.settings = settings or ProfilerSettings()
        self.authorize = authorize
        self.resolve_base_path = resolve_base_path or static_base_path(
            self.settings.routing.route_base_path,
            self.settings.routing.application_path,
        )

    def is_authorized(self, request: Any = None) -> bool:
        if self.authorize is None:
            return True
        return self.authorize(request)

    def build_render_payload(
        self,
        session: Session | None,
        options: RenderOptions | None = None,
        request: Any = None,
    ) -> IncludesPayload | None:
        """Collect ids, path and display options for ``session``.

        Args:
            session: Session being rendered, or None
            options: Per-render display toggles, layered over settings
            request: Request context handed to the authorization policy

        Returns:
            Payload, or None when there is no session

        Raises:
            Whatever storage or the authorization policy raise.
        """
        if session is None:
            return None

        authorized = self.is_authorized(request)
        ids = list(self.storage.get_unviewed_ids(session.user)) if authorized else []
        # The current session can't have been viewed yet
        ids.append(session.id)

        path = ensure_trailing_slash(self.resolve_base_path())
        defaults = self.settings.display.to_options()
        merged = options.merged_over(defaults) if options is not None else defaults

        logger.debug(
            f"Session {session.id}: surfacing {len(ids)} id(s) "
            f"for {session.user or 'anonymous'} (authorized={authorized})"
        )
        return IncludesPayload(
            path=path,
            ids=ids,
            current_id=session.id,
            authorized=authorized,
            options=merged,
        )


def render_includes_payload(
    session: Session | None,
    options: RenderOptions | None = None,
    request: Any = None,
    *,
    storage: SessionStorage,
    settings: ProfilerSettings | None = None,
    authorize: AuthorizationPolicy | None = None,
    resolve_base_path: BasePathResolver | None = None,
) -> IncludesPayload | None:
    """One-shot helper around RenderCoordinator.build_render_payload."""
    coordinator = RenderCoordinator(
        storage, settings=settings, authorize=authorize, resolve_base_path=resolve_base_path
    )
    return coordinator.build_render_payload(session, options, request)
