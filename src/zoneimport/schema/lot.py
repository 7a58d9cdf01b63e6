"""Lot parameter table.

Each lot field maps one CSV column onto a fixed location in the nested lot
record consumed by the entity store. Aliases are the alternative header
spellings tried by the matcher's second pass.
"""

from .models import LotField

LOT_FIELDS: tuple[LotField, ...] = (
    # Lot dimensions
    LotField(
        key="lotWidth",
        label="Lot Width",
        group="Lot Dimensions",
        aliases=("lotwidth", "lot_width", "lotw", "width"),
        target=("lotWidth",),
    ),
    LotField(
        key="lotDepth",
        label="Lot Depth",
        group="Lot Dimensions",
        aliases=("lotdepth", "lot_depth", "lotd", "depth"),
        target=("lotDepth",),
    ),
    # Setbacks
    LotField(
        key="setbackFront",
        label="Front Setback",
        group="Setbacks",
        aliases=("setbackfront", "frontsetback", "front", "setback_front", "front_setback"),
        target=("setbacks", "principal", "front"),
    ),
    LotField(
        key="setbackRear",
        label="Rear Setback",
        group="Setbacks",
        aliases=("setbackrear", "rearsetback", "rear", "setback_rear", "rear_setback"),
        target=("setbacks", "principal", "rear"),
    ),
    LotField(
        key="setbackSideLeft",
        label="Side Left Setback",
        group="Setbacks",
        aliases=(
            "setbacksideleft",
            "sideleftsetback",
            "leftsetback",
            "setback_side_left",
            "left_setback",
            "sideleft",
        ),
        target=("setbacks", "principal", "sideInterior"),
    ),
    # The lot model has no right-side setback; the street side minimum stands in for it.
    LotField(
        key="setbackSideRight",
        label="Side Right Setback",
        group="Setbacks",
        aliases=(
            "setbacksideright",
            "siderightsetback",
            "rightsetback",
            "setback_side_right",
            "right_setback",
            "sideright",
        ),
        target=("setbacks", "principal", "minSideStreet"),
    ),
    # Principal building
    LotField(
        key="buildingWidth",
        label="Building Width",
        group="Building",
        aliases=("buildingwidth", "building_width", "bldgwidth", "bldg_width"),
        target=("buildings", "principal", "width"),
    ),
    LotField(
        key="buildingDepth",
        label="Building Depth",
        group="Building",
        aliases=("buildingdepth", "building_depth", "bldgdepth", "bldg_depth"),
        target=("buildings", "principal", "depth"),
    ),
    LotField(
        key="buildingHeight",
        label="Building Height",
        group="Building",
        aliases=("buildingheight", "building_height", "bldgheight", "bldg_height", "height"),
        target=("buildings", "principal", "maxHeight"),
    ),
    LotField(
        key="buildingStories",
        label="Stories",
        group="Building",
        aliases=(
            "buildingstories",
            "building_stories",
            "stories",
            "numstories",
            "num_stories",
            "floors",
            "numfloors",
        ),
        target=("buildings", "principal", "stories"),
    ),
    LotField(
        key="firstFloorHeight",
        label="First Floor Height",
        group="Building",
        aliases=(
            "firstfloorheight",
            "first_floor_height",
            "firstfloor",
            "groundfloorheight",
            "ground_floor_height",
        ),
        target=("buildings", "principal", "firstFloorHeight"),
    ),
    LotField(
        key="upperFloorHeight",
        label="Upper Floor Height",
        group="Building",
        aliases=(
            "upperfloorheight",
            "upper_floor_height",
            "upperfloor",
            "typicalfloorheight",
            "typical_floor_height",
        ),
        target=("buildings", "principal", "upperFloorHeight"),
    ),
    LotField(
        key="maxHeight",
        label="Max Height",
        group="Building",
        aliases=(
            "maxheight",
            "max_height",
            "maximumheight",
            "maximum_height",
            "heightlimit",
            "height_limit",
        ),
        target=("buildings", "principal", "maxHeight"),
    ),
    # Accessory building
    LotField(
        key="accessoryWidth",
        label="Accessory Width",
        group="Accessory",
        aliases=("accessorywidth", "accessory_width", "accwidth", "acc_width", "aduwidth", "adu_width"),
        target=("buildings", "accessory", "width"),
    ),
    LotField(
        key="accessoryDepth",
        label="Accessory Depth",
        group="Accessory",
        aliases=("accessorydepth", "accessory_depth", "accdepth", "acc_depth", "adudepth", "adu_depth"),
        target=("buildings", "accessory", "depth"),
    ),
    LotField(
        key="accessoryMaxHeight",
        label="Accessory Max Height",
        group="Accessory",
        aliases=(
            "accessorymaxheight",
            "accessory_max_height",
            "accmaxheight",
            "acc_max_height",
            "accessoryheight",
            "accessory_height",
            "adumaxheight",
        ),
        target=("buildings", "accessory", "maxHeight"),
    ),
)

LOT_FIELDS_BY_KEY: dict[str, LotField] = {field.key: field for field in LOT_FIELDS}
