import logging

from flask import Flask, Response, redirect, render_template, request, session, url_for

from .calendar.generator import generate_calendar
from .config import WeddingsConfig
from .exceptions import ConfigurationError, DetailsNotFoundError
from .gate import UnlockStore
from .loader import DetailsLoader
from .render import render_invite

logger = logging.getLogger(__name__)

NO_STORE = {"Cache-Control": "no-store"}


def create_app(config: WeddingsConfig | None = None):
    config = config or WeddingsConfig.from_env()

    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.secret_key
    app.config["WEDDINGS"] = config
    loader = DetailsLoader(timeout=config.details_timeout)

    def lock_screen(slug, status=200, **context):
        html = render_template("invite.html", slug=slug, page=None, **context)
        return html, status, NO_STORE

    def load_details(slug):
        """Load details fresh, or return the error response to show instead."""
        try:
            return loader.load(config.details_url(slug), slug=slug), None
        except DetailsNotFoundError:
            return None, lock_screen(slug, 404, state="missing")
        except ConfigurationError as e:
            logger.error(f"Invite '{slug}' is misconfigured: {e}")
            return None, lock_screen(slug, 500, state="error")

    @app.route("/weddings/<slug>/", methods=["GET"])
    def invite(slug):
        details, failure = load_details(slug)
        if failure:
            return failure

        if not UnlockStore(session).is_unlocked(slug):
            return lock_screen(slug, state="locked", hint=details.password_hint)

        page = render_invite(
            details,
            url_for("calendar_file", slug=slug),
            tz=config.tzinfo,
            page_url=request.url,
            slug=slug,
        )
        html = render_template("invite.html", slug=slug, page=page, state="unlocked")
        return html, 200, NO_STORE

    @app.route("/weddings/<slug>/unlock", methods=["POST"])
    def unlock(slug):
        details, failure = load_details(slug)
        if failure:
            return failure

        if UnlockStore(session).attempt(slug, request.form.get("password", ""), details):
            session.permanent = True
            return redirect(url_for("invite", slug=slug))

        return lock_screen(slug, 401, state="locked", hint=details.password_hint, error=True)

    @app.route("/weddings/<slug>/lock", methods=["POST"])
    def lock(slug):
        UnlockStore(session).lock(slug)
        return redirect(url_for("invite", slug=slug))

    @app.route("/weddings/<slug>/calendar.ics", methods=["GET"])
    def calendar_file(slug):
        """Serve the generated calendar, building it on the fly if missing."""
        path = config.calendar_path(slug)
        if path.is_file():
            ical_content = path.read_bytes()
        else:
            try:
                document = loader.load_raw(config.details_url(slug))
            except (DetailsNotFoundError, ConfigurationError):
                return ("No calendar available", 404)
            ical_content = generate_calendar(document, slug, config=config).encode("utf-8")

        return Response(
            ical_content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": f"attachment; filename={slug}.ics"},
        )

    return app
