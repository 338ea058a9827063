"""
Тесты обхода графа импортов и разрешения чанков.
"""
from django.test import SimpleTestCase

from apps.vite.chunks import ChunkResolver, collect_css, collect_imports
from apps.vite.exceptions import EntryNotFound, EntryWithoutFile
from apps.vite.manifest import Manifest, ManifestEntry
from apps.vite.paths import PathResolver
from apps.vite.tags import Tag, TagKind
from apps.vite.tests.helpers import PUBLIC


def _manifest(**chunks):
    entries = {key: ManifestEntry.from_dict(key, data) for key, data in chunks.items()}
    return Manifest(entries=entries, path=PUBLIC / "inline" / "manifest.json")


class CollectCssTestCase(SimpleTestCase):
    def setUp(self):
        self.manifest = Manifest.load(PUBLIC / "graph" / "manifest.json")

    def test_depth_first_order_without_duplicates(self):
        """Сначала CSS записи, затем CSS импортов в глубину, без повторов"""
        with self.assertLogs("apps.vite.chunks", "WARNING"):
            css = collect_css(self.manifest, "src/main.ts")
        self.assertEqual(css, [
            "assets/main.0b6e1f3d.css",
            "assets/main-extra.9a7c5e21.css",
            "assets/x.e81b0c44.css",
            "assets/shared.6c1a90de.css",
        ])

    def test_dynamic_imports_css_is_not_collected(self):
        """CSS динамических импортов не собирается"""
        with self.assertLogs("apps.vite.chunks", "WARNING"):
            css = collect_css(self.manifest, "src/main.ts")
        self.assertNotIn("assets/lazy.3f0a7b65.css", css)

    def test_diamond_import(self):
        """Общий чанк в ромбовидном графе посещается один раз"""
        manifest = _manifest(**{
            "root": {"file": "root.js", "imports": ["x", "y"]},
            "x": {"file": "x.js", "imports": ["shared"]},
            "y": {"file": "y.js", "imports": ["shared"]},
            "shared": {"file": "shared.js", "css": ["s.css"]},
        })
        self.assertEqual(collect_css(manifest, "root"), ["s.css"])
        self.assertEqual([e.key for e in collect_imports(manifest, "root")], ["x", "shared", "y"])

    def test_cycle_terminates(self):
        """Циклические импорты не зацикливают обход"""
        self.assertEqual(
            collect_css(self.manifest, "src/a.ts"),
            ["assets/a.33cc44dd.css", "assets/b.77009911.css"],
        )
        self.assertEqual(
            collect_css(self.manifest, "src/b.ts"),
            ["assets/b.77009911.css", "assets/a.33cc44dd.css"],
        )

    def test_self_import(self):
        """Чанк, импортирующий сам себя"""
        manifest = _manifest(loop={"file": "loop.js", "css": ["loop.css"], "imports": ["loop"]})
        self.assertEqual(collect_css(manifest, "loop"), ["loop.css"])
        self.assertEqual(collect_imports(manifest, "loop"), [])

    def test_dangling_import_is_skipped(self):
        """Отсутствующий импорт пропускается с предупреждением"""
        with self.assertLogs("apps.vite.chunks", "WARNING") as logs:
            imports = collect_imports(self.manifest, "src/main.ts")
        self.assertEqual(
            [e.key for e in imports],
            ["_x.51d2c8aa.js", "_shared.0d93bb12.js", "_y.c03e77f1.js"],
        )
        self.assertIn("_missing.ffffffff.js", logs.output[0])


class ChunkResolverTestCase(SimpleTestCase):
    def setUp(self):
        self.manifest = Manifest.load(PUBLIC / "graph" / "manifest.json")
        self.resolver = ChunkResolver(PathResolver("http://localhost"), "graph/")

    def test_direct_styles_keep_declaration_order(self):
        """Без агрегации только собственный CSS в порядке объявления"""
        chunk = self.resolver.resolve(self.manifest, "main")
        self.assertEqual(chunk.main, Tag(TagKind.SCRIPT, "http://localhost/graph/assets/main.4f1c2a9b.js"))
        self.assertEqual(
            [t.url for t in chunk.styles],
            [
                "http://localhost/graph/assets/main.0b6e1f3d.css",
                "http://localhost/graph/assets/main-extra.9a7c5e21.css",
            ],
        )
        self.assertEqual(chunk.preloads, ())
        self.assertEqual(chunk.prefetch_urls, ())

    def test_aggregate(self):
        """Агрегация: CSS импортов, modulepreload для чанков, prefetch для динамических импортов"""
        with self.assertLogs("apps.vite.chunks", "WARNING"):
            chunk = self.resolver.resolve(self.manifest, "main", aggregate=True)

        self.assertEqual(len(chunk.styles), 4)
        self.assertTrue(all(t.kind is TagKind.STYLE for t in chunk.styles))
        self.assertEqual(
            [t.url for t in chunk.preloads],
            [
                "http://localhost/graph/assets/x.51d2c8aa.js",
                "http://localhost/graph/assets/shared.0d93bb12.js",
                "http://localhost/graph/assets/y.c03e77f1.js",
            ],
        )
        self.assertTrue(all(t.kind is TagKind.PRELOAD for t in chunk.preloads))
        self.assertEqual(chunk.prefetch_urls, ("http://localhost/graph/assets/lazy.8e2f4d10.js",))
        self.assertEqual(chunk.tags[0], chunk.main)

    def test_css_entry_is_style_tag(self):
        """CSS точка входа разрешается в stylesheet"""
        chunk = self.resolver.resolve(self.manifest, "styles")
        self.assertEqual(chunk.main, Tag(TagKind.STYLE, "http://localhost/graph/assets/styles.c4d5e6f7.css"))
        self.assertEqual(chunk.styles, ())

    def test_dangling_dynamic_import(self):
        """Отсутствующий динамический импорт не попадает в prefetch"""
        with self.assertLogs("apps.vite.chunks", "WARNING"):
            chunk = self.resolver.resolve(self.manifest, "src/lazy.ts", aggregate=True)
        self.assertEqual(chunk.prefetch_urls, ())
        self.assertEqual([t.url for t in chunk.styles], ["http://localhost/graph/assets/lazy.3f0a7b65.css"])

    def test_asset_host(self):
        """asset_host заменяет app_url"""
        resolver = ChunkResolver(PathResolver("http://localhost"), "graph/", "https://cdn.example.com/")
        chunk = resolver.resolve(self.manifest, "a")
        self.assertEqual(chunk.main.url, "https://cdn.example.com/graph/assets/a.11aa22bb.js")

    def test_asset_urls(self):
        """URL ассетов записи"""
        entry = self.manifest.get("src/main.ts")
        self.assertEqual(self.resolver.asset_urls(entry), [
            "http://localhost/graph/assets/logo.77aa31c0.svg",
            "http://localhost/graph/assets/inter.2b9d0e4f.woff2",
        ])

    def test_unknown_entry(self):
        """Неизвестная точка входа"""
        with self.assertRaises(EntryNotFound):
            self.resolver.resolve(self.manifest, "unknown")

    def test_entry_without_file(self):
        """Запись без file - ошибка, а не тег на каталог сборки"""
        manifest = _manifest(**{"src/main.ts": {"isEntry": True}})
        for aggregate in (False, True):
            with self.assertRaises(EntryWithoutFile) as cm:
                self.resolver.resolve(manifest, "src/main.ts", aggregate=aggregate)
            self.assertIsInstance(cm.exception, EntryNotFound)
            self.assertIn("has no file", str(cm.exception))
