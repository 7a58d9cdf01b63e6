"""District parameter table.

District parameters are reference values (min/max ranges, single-valued
build-to zones, and permitted flags) addressed by dot-path keys into the
store's ``districtParameters`` tree. The table has no aliases.
"""

from .models import DistrictField

_MIN_MAX = (("min", "Min"), ("max", "Max"))
_PERMITTED_MIN_MAX = (("permitted", "Permitted"),) + _MIN_MAX


def _ranged(
    prefix: str,
    label_prefix: str,
    group: str,
    items: list[tuple[str, str]],
    suffixes: tuple[tuple[str, str], ...] = _MIN_MAX,
) -> list[DistrictField]:
    fields = []
    for path, label in items:
        for suffix, suffix_label in suffixes:
            key = f"{prefix}{path}.{suffix}"
            fields.append(
                DistrictField(
                    key=key,
                    label=f"{label_prefix}{label} {suffix_label}",
                    group=group,
                    value_type="boolean" if suffix == "permitted" else "number",
                )
            )
    return fields


def _build_district_fields() -> tuple[DistrictField, ...]:
    fields: list[DistrictField] = []

    fields += _ranged(
        "",
        "",
        "Lot Dimensions",
        [
            ("lotArea", "Lot Area"),
            ("lotCoverage", "Lot Coverage"),
            ("lotWidth", "Lot Width"),
            ("lotWidthAtSetback", "Lot Width at Setback"),
            ("lotDepth", "Lot Depth"),
        ],
    )

    setbacks = [
        ("front", "Front Setback"),
        ("rear", "Rear Setback"),
        ("sideInterior", "Side Interior Setback"),
        ("sideStreet", "Side Street Setback"),
        ("distanceBetweenBuildings", "Distance Between Buildings"),
    ]
    fields += _ranged("setbacksPrincipal.", "Principal ", "Setbacks - Principal", setbacks)
    # Build-to zones are single percentages, not ranges
    fields.append(
        DistrictField(key="setbacksPrincipal.btzFront", label="BTZ Front", group="Setbacks - Principal")
    )
    fields.append(
        DistrictField(
            key="setbacksPrincipal.btzSideStreet", label="BTZ Side Street", group="Setbacks - Principal"
        )
    )
    fields += _ranged("setbacksAccessory.", "Accessory ", "Setbacks - Accessory", setbacks)

    structure_items = [
        ("height", "Height"),
        ("stories", "Stories"),
        ("firstStoryHeight", "First Story Height"),
        ("upperStoryHeight", "Upper Story Height"),
    ]
    for structure in ("principal", "accessory"):
        title = structure.capitalize()
        fields += _ranged(
            f"structures.{structure}.",
            f"{title} Structure ",
            f"Structures - {title}",
            structure_items,
        )

    fields += _ranged(
        "lotAccess.",
        "",
        "Lot Access",
        [
            ("primaryStreet", "Primary Street Access"),
            ("secondaryStreet", "Secondary Street Access"),
            ("rearAlley", "Rear Alley Access"),
            ("sharedDrive", "Shared Drive Access"),
        ],
        _PERMITTED_MIN_MAX,
    )

    fields += _ranged(
        "parkingLocations.",
        "",
        "Parking Locations",
        [
            ("front", "Front Parking"),
            ("sideInterior", "Side Interior Parking"),
            ("sideStreet", "Side Street Parking"),
            ("rear", "Rear Parking"),
        ],
        _PERMITTED_MIN_MAX,
    )

    return tuple(fields)


DISTRICT_FIELDS: tuple[DistrictField, ...] = _build_district_fields()

DISTRICT_FIELDS_BY_KEY: dict[str, DistrictField] = {field.key: field for field in DISTRICT_FIELDS}
