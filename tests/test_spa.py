"""Tests for the request dispatcher — static assets, then the SPA fallback."""

from pathlib import Path

from talentdesk.app import App, create_app
from talentdesk.config import NOT_READY_MESSAGE, ServerConfig
from talentdesk.static.resolver import ResolvedRoot, ServeState, resolve_static_root
from talentdesk.testing import TestClient

from conftest import INDEX_HTML, PNG_BYTES


class TestEntryDocumentFallback:
    async def test_unknown_path_serves_index(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/xyz")
            assert response.status == 200
            assert response.text == INDEX_HTML
            assert response.content_type.startswith("text/html")

    async def test_nested_client_route_serves_index(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/talent/42")
            assert response.status == 200
            assert response.text == INDEX_HTML

    async def test_root_serves_index(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert response.text == INDEX_HTML

    async def test_missing_asset_falls_back_to_index(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/assets/missing.js")
            assert response.status == 200
            assert response.text == INDEX_HTML

    async def test_query_string_ignored(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/dashboard?tab=talents")
            assert response.status == 200
            assert response.text == INDEX_HTML

    async def test_post_to_client_route_gets_index(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.post("/register")
            assert response.status == 200
            assert response.text == INDEX_HTML

    async def test_entry_document_removed_after_startup(self, built_root: Path) -> None:
        app = App(ResolvedRoot(path=built_root, state=ServeState.READY))
        (built_root / "index.html").unlink()

        async with TestClient(app) as client:
            response = await client.get("/dashboard")
            assert response.status == 404
            assert response.text == NOT_READY_MESSAGE


class TestNotReady:
    async def test_empty_root_returns_plain_text_404(self, empty_app: App) -> None:
        async with TestClient(empty_app) as client:
            response = await client.get("/anything")
            assert response.status == 404
            assert response.content_type.startswith("text/plain")
            assert response.text == NOT_READY_MESSAGE

    async def test_every_path_is_404(self, empty_app: App) -> None:
        async with TestClient(empty_app) as client:
            for path in ("/", "/dashboard", "/assets/app.js", "/talent/7"):
                response = await client.get(path)
                assert response.status == 404
                assert response.text

    async def test_degraded_state_ignores_late_entry_document(self, tmp_path: Path) -> None:
        """The serve state is fixed at startup; a later build needs a restart."""
        public = tmp_path / "public"
        public.mkdir()
        app = App(ResolvedRoot(path=public, state=ServeState.DEGRADED))
        (public / "index.html").write_text(INDEX_HTML)

        async with TestClient(app) as client:
            response = await client.get("/dashboard")
            assert response.status == 404

    async def test_degraded_root_still_serves_assets(self, tmp_path: Path) -> None:
        dist = tmp_path / "dist"
        dist.mkdir()
        (dist / "robots.txt").write_text("User-agent: *")
        app = App(ResolvedRoot(path=dist, state=ServeState.DEGRADED))

        async with TestClient(app) as client:
            assert (await client.get("/robots.txt")).status == 200
            assert (await client.get("/dashboard")).status == 404

    async def test_custom_message(self, tmp_path: Path) -> None:
        config = ServerConfig(
            static_candidates=(tmp_path / "missing",),
            base_dir=tmp_path / "server",
            not_ready_message="Come back soon.",
        )
        async with TestClient(create_app(config)) as client:
            response = await client.get("/")
            assert response.status == 404
            assert response.text == "Come back soon."

    async def test_file_root_is_not_served(self, tmp_path: Path) -> None:
        """A candidate that exists as a plain file wins, but serves nothing."""
        (tmp_path / "a").write_text("SECRET FILE")
        root = resolve_static_root([tmp_path / "a"], fallback=tmp_path / "public")
        assert root.state is ServeState.DEGRADED

        async with TestClient(App(root)) as client:
            for path in ("/", "/a", "/dashboard"):
                response = await client.get(path)
                assert response.status == 404
                assert response.text == NOT_READY_MESSAGE


class TestStaticAssets:
    async def test_asset_bytes_are_served(self, ready_app: App, built_root: Path) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/assets/app.js")
            assert response.status == 200
            assert response.body == (built_root / "assets" / "app.js").read_bytes()
            assert response.text != INDEX_HTML
            assert "javascript" in response.content_type

    async def test_image_content_type(self, ready_app: App) -> None:
        async with TestClient(ready_app) as client:
            response = await client.get("/assets/logo.png")
            assert response.status == 200
            assert response.content_type == "image/png"
            assert response.body == PNG_BYTES


class TestScenario:
    async def test_second_candidate_serves_routes_and_assets(self, tmp_path: Path) -> None:
        a, b, c = tmp_path / "a", tmp_path / "b", tmp_path / "c"
        (b / "assets").mkdir(parents=True)
        (b / "index.html").write_text(INDEX_HTML)
        (b / "assets" / "logo.png").write_bytes(PNG_BYTES)

        app = create_app(ServerConfig(static_candidates=(a, b, c), base_dir=tmp_path / "server"))
        assert app.root.path == b
        assert app.root.state is ServeState.READY

        async with TestClient(app) as client:
            page = await client.get("/dashboard")
            assert page.status == 200
            assert page.text == INDEX_HTML

            logo = await client.get("/assets/logo.png")
            assert logo.status == 200
            assert logo.body == PNG_BYTES
            assert logo.content_type.startswith("image/")

    async def test_no_candidates_creates_fallback(self, base_dir: Path) -> None:
        app = create_app(ServerConfig(base_dir=base_dir))

        assert app.root.path == (base_dir / "public").resolve()
        assert app.root.path.is_dir()
        assert app.root.state is ServeState.DEGRADED

        async with TestClient(app) as client:
            response = await client.get("/dashboard")
            assert response.status == 404
