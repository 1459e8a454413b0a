"""Manager class for Panda3D material operations."""

from panda3d.core import Material, MaterialAttrib, LVector4


class MaterialManager:
    """Handles reading and replacing albedo colors on Panda3D materials.

    A node is material-bearing when a Material is set on the node itself or
    on any of its geom states (the layout produced by the glTF loader).
    Colors are changed by swapping in a modified copy of each material, so
    materials shared with other nodes are left untouched.
    """

    # Reported for material-bearing nodes whose material has no base color
    DEFAULT_COLOR = LVector4(0.8, 0.8, 0.8, 1.0)

    @staticmethod
    def _geom_material_slots(nodepath):
        """Yield (geom index, Material) for materials set on geom states."""
        node = nodepath.node()
        if not node.isGeomNode():
            return
        attrib_type = MaterialAttrib.getClassType()
        for i in range(node.getNumGeoms()):
            state = node.getGeomState(i)
            if state.hasAttrib(attrib_type):
                material = state.getAttrib(attrib_type).getMaterial()
                if material is not None:
                    yield i, material

    @staticmethod
    def has_material(nodepath) -> bool:
        if nodepath.hasMaterial():
            return True
        for _ in MaterialManager._geom_material_slots(nodepath):
            return True
        return False

    @staticmethod
    def get_base_color(nodepath):
        """Return the base color of the first material found on the node.

        Returns:
            tuple: RGBA color, or DEFAULT_COLOR if the material has none
        """
        materials = []
        if nodepath.hasMaterial():
            materials.append(nodepath.getMaterial())
        materials.extend(m for _, m in MaterialManager._geom_material_slots(nodepath))

        for material in materials:
            if material.hasBaseColor():
                return tuple(material.getBaseColor())
        return tuple(MaterialManager.DEFAULT_COLOR)

    @staticmethod
    def _recolored(material, base_color):
        # Make a copy so other users of the material keep their color
        material = Material(material)
        material.setBaseColor(base_color)
        return material

    @staticmethod
    def set_base_color(nodepath, rgba) -> int:
        """Set the base color of every material on the node.

        Args:
            nodepath: NodePath of the material-bearing node
            rgba: RGBA color

        Returns:
            int: Number of materials replaced
        """
        base_color = LVector4(*rgba)
        replaced = 0

        if nodepath.hasMaterial():
            nodepath.setMaterial(
                MaterialManager._recolored(nodepath.getMaterial(), base_color), 1
            )
            replaced += 1

        node = nodepath.node()
        for i, material in list(MaterialManager._geom_material_slots(nodepath)):
            state = node.getGeomState(i)
            new_attrib = MaterialAttrib.make(
                MaterialManager._recolored(material, base_color)
            )
            node.setGeomState(i, state.setAttrib(new_attrib))
            replaced += 1

        return replaced
