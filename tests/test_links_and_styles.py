"""
单元测试：外链构造与主题样式
"""
from dataclasses import replace

from folio.domain.models import FontFamily, ThemeMode
from folio.domain.seed import seed_state
from folio.web.links import encode_uri_component, mailto_url, map_embed_url
from folio.web.styles import theme_css


class TestLinks:
    """外链测试类"""

    def test_mailto(self):
        assert mailto_url("a_sahay@bitmesra.ac.in") == "mailto:a_sahay@bitmesra.ac.in"

    def test_encode_matches_encode_uri_component(self):
        assert encode_uri_component("Jasidih, Deoghar") == "Jasidih%2C%20Deoghar"
        assert encode_uri_component("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"
        assert encode_uri_component("it's (ok)!~*.-_") == "it's%20(ok)!~*.-_"
        assert encode_uri_component("L’Aquila") == "L%E2%80%99Aquila"

    def test_map_embed_url(self):
        url = map_embed_url("Jasidih, Deoghar, Jharkhand, India")
        assert url == (
            "https://maps.google.com/maps?q=Jasidih%2C%20Deoghar%2C%20Jharkhand%2C%20India"
            "&t=&z=13&ie=UTF8&iwloc=&output=embed"
        )


class TestThemeCss:
    """主题样式测试类"""

    def test_light_theme(self):
        css = theme_css(seed_state().settings)
        assert "#ffffff" in css
        assert "#0f172a" in css
        assert "Inter" in css

    def test_dark_serif_theme(self):
        settings = replace(
            seed_state().settings, theme_mode=ThemeMode.DARK, font_family=FontFamily.SERIF, primary_color="#ff0000"
        )
        css = theme_css(settings)
        assert "background-color: #0f172a" in css
        assert "#ff0000" in css
        assert "font-family: 'Merriweather'" in css
