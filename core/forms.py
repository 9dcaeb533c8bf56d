"""Forms for the radar chart demo page."""

from __future__ import annotations

from django import forms

from core.charting.palette import resolve_colour_matrix
from core.charting.schema import BLANK_LABELS, ColourMatrix, InvalidInputError, LabelSpec, RadarOptions


class RadarOptionsForm(forms.Form):
    """Validate radar chart options submitted from the demo page.

    Unchecked checkboxes submit nothing, so a bound form reads them as False.
    Views should only bind the form when the request carries options.
    """

    title = forms.CharField(required=False, max_length=200, label="Title")
    max_scale = forms.FloatField(required=False, label="Max scale")
    scale_step_width = forms.FloatField(
        required=False,
        min_value=0,
        label="Step width",
        help_text="Spacing between rings; only used together with a max scale.",
    )
    scale_start_value = forms.FloatField(required=False, label="Start value", help_text="Defaults to 0.")
    label_size = forms.IntegerField(required=False, min_value=1, max_value=96, label="Label size")
    polygon_alpha = forms.FloatField(required=False, min_value=0, max_value=1, label="Polygon alpha")
    line_alpha = forms.FloatField(required=False, min_value=0, max_value=1, label="Line alpha")
    colours = forms.CharField(
        required=False,
        label="Colours",
        help_text="Comma-separated #RRGGBB colours, cycled across series.",
    )
    show_legend = forms.BooleanField(required=False, label="Show legend")
    add_dots = forms.BooleanField(required=False, label="Show dots")
    show_tooltip_label = forms.BooleanField(required=False, label="Tooltip labels")
    hide_labels = forms.BooleanField(required=False, label="Hide axis labels")

    def clean(self) -> dict[str, object]:
        """Resolve colours and reject options the builder would refuse."""

        cleaned = super().clean()
        raw = str(cleaned.get("colours") or "").strip()
        cleaned["colour_matrix"] = None
        if raw:
            try:
                cleaned["colour_matrix"] = resolve_colour_matrix([part.strip() for part in raw.split(",") if part.strip()])
            except InvalidInputError as exc:
                self.add_error("colours", str(exc))
        return cleaned

    def options(self) -> RadarOptions:
        """Return RadarOptions for a valid bound form.

        Raises:
            ValueError: If the form is not valid.
        """

        if not self.is_valid():
            raise ValueError("RadarOptionsForm must be valid before building RadarOptions.")

        data = self.cleaned_data
        defaults = RadarOptions()
        start_value = data.get("scale_start_value")
        label_size = data.get("label_size")
        polygon_alpha = data.get("polygon_alpha")
        line_alpha = data.get("line_alpha")
        colour_matrix: ColourMatrix | None = data.get("colour_matrix")
        return RadarOptions(
            title=(data.get("title") or None),
            max_scale=data.get("max_scale"),
            scale_step_width=data.get("scale_step_width"),
            scale_start_value=defaults.scale_start_value if start_value is None else start_value,
            label_size=defaults.label_size if label_size is None else label_size,
            show_legend=bool(data.get("show_legend")),
            add_dots=bool(data.get("add_dots")),
            colour_matrix=colour_matrix,
            polygon_alpha=defaults.polygon_alpha if polygon_alpha is None else polygon_alpha,
            line_alpha=defaults.line_alpha if line_alpha is None else line_alpha,
            show_tooltip_label=bool(data.get("show_tooltip_label")),
        )

    def label_spec(self, derived: tuple[str, ...]) -> LabelSpec | tuple[str, ...]:
        """Return blank labels when hidden, otherwise the given labels."""

        if self.is_valid() and self.cleaned_data.get("hide_labels"):
            return BLANK_LABELS
        return derived


def initial_options_form() -> RadarOptionsForm:
    """Return an unbound form whose initial values match RadarOptions defaults."""

    defaults = RadarOptions()
    return RadarOptionsForm(
        initial={
            "scale_start_value": defaults.scale_start_value,
            "label_size": defaults.label_size,
            "polygon_alpha": defaults.polygon_alpha,
            "line_alpha": defaults.line_alpha,
            "show_legend": defaults.show_legend,
            "add_dots": defaults.add_dots,
            "show_tooltip_label": defaults.show_tooltip_label,
        }
    )
