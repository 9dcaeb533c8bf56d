"""Integration tests for the radar demo page and JSON endpoint."""

from __future__ import annotations

import pytest
from django.urls import reverse

from core.charting.samples import SKILLS
from core.views import DEMO_ELEMENT_ID

pytestmark = pytest.mark.integration


def test_demo_page_renders_skills_chart(client) -> None:
    """The demo page embeds the sample data with default options."""

    response = client.get(reverse("core:radar_demo"))

    assert response.status_code == 200
    widget = response.context["widget"]
    assert widget.element_id == DEMO_ELEMENT_ID
    assert widget.config["data"]["labels"] == list(SKILLS["Label"])
    assert [d["label"] for d in widget.config["data"]["datasets"]] == ["Rich", "Andy", "Aimee"]
    content = response.content.decode()
    assert f'<canvas class="chartjs-radar" height="300" id="{DEMO_ELEMENT_ID}" width="450"></canvas>' in content
    assert f'<script id="{DEMO_ELEMENT_ID}-config" type="application/json">' in content
    assert "chart.js@2" in content


def test_demo_page_applies_submitted_options(client) -> None:
    """Submitted options change the embedded configuration."""

    response = client.get(
        reverse("core:radar_demo"),
        {
            "configure": "1",
            "title": "Data Science Radar",
            "max_scale": "10",
            "scale_step_width": "2",
            "show_legend": "on",
            "show_tooltip_label": "on",
        },
    )

    assert response.status_code == 200
    config = response.context["widget"].config
    assert config["options"]["title"] == {"display": True, "text": "Data Science Radar"}
    assert config["options"]["scale"]["ticks"] == {"max": 10.0, "min": 0, "stepSize": 2.0, "maxTicksLimit": 1000}
    assert all(d["pointRadius"] == 0 for d in config["data"]["datasets"])


def test_demo_page_shows_form_errors(client) -> None:
    """Invalid options keep the default chart and report the error."""

    response = client.get(reverse("core:radar_demo"), {"configure": "1", "polygon_alpha": "2"})

    assert response.status_code == 200
    assert "polygon_alpha" in response.context["form"].errors
    assert response.context["widget"].config["options"]["legend"] == {"display": True}


def test_api_returns_default_configuration(client) -> None:
    """The JSON endpoint returns the same configuration the page embeds."""

    response = client.get(reverse("core:radar_config_api"))

    assert response.status_code == 200
    payload = response.json()
    assert payload["data"]["labels"] == list(SKILLS["Label"])
    assert len(payload["data"]["datasets"]) == 3
    assert payload["options"]["scale"] == {"ticks": {"min": 0}, "pointLabels": {"fontSize": 18}}


def test_api_hides_labels_and_uses_custom_colours(client) -> None:
    """Blank labels and user colours are honoured by the endpoint."""

    response = client.get(
        reverse("core:radar_config_api"),
        {"configure": "1", "hide_labels": "on", "colours": "#ff0000", "add_dots": "on"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["data"]["labels"] == [""] * len(SKILLS["Label"])
    assert {d["borderColor"] for d in payload["data"]["datasets"]} == {"rgba(255,0,0,0.8)"}
    assert all("pointRadius" not in d for d in payload["data"]["datasets"])


def test_api_rejects_invalid_options(client) -> None:
    """Invalid options produce a 400 with field errors."""

    response = client.get(reverse("core:radar_config_api"), {"configure": "1", "colours": "red, #00ff00"})

    assert response.status_code == 400
    assert "colours" in response.json()["errors"]
