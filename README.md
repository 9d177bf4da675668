# jmart

This package holds the logic and geometry behind a small 3D supermarket simulation. It needs no graphics context. Its mesh builders return plain vertex and index lists, and any renderer can upload those.

## Modules

### `jmart.vertex`

Immutable value types:

- `Position`, `TexCoord` and `Color` can be iterated as tuples.
- `Vertex` holds `pos`, `color`, `normal` and `tex_coord`.
- `Component` is one RGB term of a material.

Mutable types:

- `Material` holds `ambient`, `diffuse`, `specular` and `shininess`.
- `Light` holds a position, a colour, attenuation terms, a `LightType` and spot parameters.

`LightType` has the members `POINT`, `DIRECTIONAL` and `SPOT`.

### `jmart.item`

`Item(name, description, count)` is a stock item. `Item.clear()` empties it: the name and description become empty and the count becomes 0.

### `jmart.npc`

`Npc` is a character with a `name`, a `role` and six `dialogue` slots. It has four fixed lines of speech:

- `cashier_welcome()`
- `cashier_leave()`
- `customer_speech()`
- `security_speech()`

### `jmart.obj`

`Obj` is a shelf slot. It has a bounding box (`maximum` and `minimum`), an `empty` flag and an item `number`. `set_bounds(maximum, minimum)` replaces both corners of the box.

### `jmart.inventory`

`update_inventory(inventory, item, add)` changes a list of `Item`s in place:

- **Adding** increments the first slot with the same name. If no slot has that name, the item fills an empty last slot or is appended.
- **Removing** decrements the first slot with the same name.
- Afterwards, items with a count move forward over slots whose count has dropped to zero.

`update_checklist(checkout_list, checklist, checked, inventory)` returns a `ChecklistStatus` with three fields:

- `checked`: one flag per checklist entry.
- `items_in_inventory`: whether the inventory holds anything.
- `complete`: whether every entry is covered.

`update_checklist` raises `ValueError` when `checked` does not have one flag per checklist entry.

### `jmart.objloader`

- `parse_obj(lines)` and `load_obj(path)` read Wavefront OBJ data with `v`, `vt`, `vn` and `f v/vt/vn` lines. Quads are split into two triangles. Malformed faces and out-of-range indices raise `ObjParseError`.
- `index_vbo(positions, uvs, normals)` merges identical corners. It returns `(indices, vertices)`.

### `jmart.tga`

`parse_tga(data)` and `load_tga(path)` read uncompressed 24- and 32-bit TGA images into a `TgaImage`. A `TgaImage` has `width`, `height`, `bytes_per_pixel`, raw `pixels` and `has_alpha`. Bad headers and truncated data raise `TgaError`.

### `jmart.mesh`

`Mesh` has a `name`, `vertices`, `indices`, a `DrawMode`, a `texture_id` and a `Material`.

- `DrawMode` is `TRIANGLES`, `TRIANGLE_STRIP` or `LINES`.
- `index_size` and `textured` are read-only properties.
- `index_range(offset, count)` returns a slice of the indices. It raises an error when the range does not fit.

### `jmart.shapes`

These functions build primitive meshes:

- `generate_axes`
- `generate_quad`
- `generate_cube`
- `generate_circle`
- `generate_ring`
- `generate_sphere`

### `jmart.meshbuilder`

These functions build loaded, textured and solid meshes:

- `generate_obj(name, file_path)` loads an OBJ model.
- `generate_text(name, num_row, num_col, font)` builds a font atlas mesh. `font` holds the pixel width of each glyph.
- `generate_picture(name, num_row, num_col)` builds a picture atlas mesh.
- `generate_triangle`, `generate_star` and `generate_cylinder` build solid shapes.

### `jmart.camera`

- `Key` names the arrow keys and W, A, S and D.
- `Camera.update(dt, keys)` pans the camera in x and y for the keys that are pressed.
- `Camera3.update(dt, width, height, xpos, ypos, keys)` yaws and pitches the camera towards the cursor's offset from the point (`width`, `height`). Pitch only happens while the target's y stays between -30 and 40.
- `reset()` returns either camera to its default placement. For `Camera3`, that is the placement it was last given through `init()`.

## Example

```python
from jmart.item import Item
from jmart.inventory import update_inventory
from jmart.shapes import generate_sphere
from jmart.vertex import Color

inventory = [Item("Pizza", "Frozen pizza", 1)]
update_inventory(inventory, Item("Pizza", "Frozen pizza", 0), True)
print(inventory[0].count)  # 2

sphere = generate_sphere("ball", Color(1, 0, 0), 10, 20, 1.0)
print(len(sphere.vertices), sphere.mode)  # 231 DrawMode.TRIANGLE_STRIP
```

## What it does not do

The package has no command and no game loop. It opens no window and does not render. It plays no sound and holds no scene of the shop, and it does not read the keyboard or mouse itself. The caller passes pressed keys and cursor positions to the cameras, and draws the meshes with a renderer of its own.

## Running the tests

```
pip install -e .[test]
pytest
```