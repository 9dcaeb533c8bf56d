"""Views for the radar chart demo page and its JSON endpoint."""

from __future__ import annotations

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render

from core.charting.builder import build_radar_config
from core.charting.samples import SKILLS
from core.charting.schema import InvalidInputError, RadarOptions, RadarWidget
from core.forms import RadarOptionsForm, initial_options_form

logger = logging.getLogger(__name__)

DEMO_ELEMENT_ID = "skills-radar"
DEMO_WIDTH = 450
DEMO_HEIGHT = 300


def radar_demo(request: HttpRequest) -> HttpResponse:
    """Render the skills sample as a radar chart with user-selected options."""

    form = _options_form(request)
    options = RadarOptions()
    labels: object = None
    if form.is_bound and form.is_valid():
        options = form.options()
        labels = form.label_spec(SKILLS["Label"])

    widget: RadarWidget | None = None
    error: str | None = None
    try:
        config = build_radar_config(_demo_scores(labels), labels, options=options)
    except InvalidInputError as exc:
        logger.info("Radar demo rejected options: %s", exc)
        error = str(exc)
    else:
        widget = RadarWidget(config=config, element_id=DEMO_ELEMENT_ID, width=DEMO_WIDTH, height=DEMO_HEIGHT)

    return render(
        request,
        "core/radar_demo.html",
        {
            "form": form,
            "widget": widget,
            "error": error,
        },
    )


def radar_config_api(request: HttpRequest) -> JsonResponse:
    """Return the skills radar configuration as JSON."""

    form = _options_form(request)
    options = RadarOptions()
    labels: object = None
    if form.is_bound:
        if not form.is_valid():
            return JsonResponse({"errors": {key: list(messages) for key, messages in form.errors.items()}}, status=400)
        options = form.options()
        labels = form.label_spec(SKILLS["Label"])

    try:
        config = build_radar_config(_demo_scores(labels), labels, options=options)
    except InvalidInputError as exc:
        return JsonResponse({"errors": {"__all__": [str(exc)]}}, status=400)
    return JsonResponse(config)


def _options_form(request: HttpRequest) -> RadarOptionsForm:
    """Bind the options form only when the request submitted it."""

    if request.GET.get("configure"):
        return RadarOptionsForm(request.GET)
    return initial_options_form()


def _demo_scores(labels: object) -> dict[str, tuple[object, ...]]:
    """Return the sample scores, dropping the label column when labels are given."""

    scores = dict(SKILLS)
    if labels is not None:
        scores.pop("Label")
    return scores
