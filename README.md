# rendray

rendray is a small path tracer written in pure Python. A scene is built from
spheres and finite open cylinders. Each shape has a diffuse, metal or glass
material. The image is written as a plain-text PPM (P3) file.

## Installing

```
pip install .
```

To install the test suite as well:

```
pip install ".[test]"
pytest
```

## Rendering the built-in scene

```
rendray > image.ppm
```

The built-in scene contains three objects:

- a red diffuse sphere centred at (2.4, 0, 0)
- a polished metal cylinder of radius 1 around the z-axis, open between z = -1 and z = 1
- a large grey diffuse sphere that serves as the ground

The camera looks from (6, 1, -4) towards the origin. It has a 50° vertical
field of view and a 16:9 aspect ratio.

Two options are available:

- `--width N` sets the image width in pixels. The default is 400.
- `--samples N` sets the number of samples per pixel. The default is 500.

Both values must be at least 1.

The image goes to standard output. Progress ("Scanlines remaining") goes to
standard error. When the render is finished, the elapsed whole seconds are
also written to standard error.

The default settings take a long time in pure Python. For a quick preview, use
smaller values:

```
rendray --width 160 --samples 20 > preview.ppm
```

## Using the library

```python
import sys

from rendray.camera import Camera
from rendray.cylinder import Cylinder
from rendray.hittable import HittableList
from rendray.material import Dielectric, Lambertian, Metal
from rendray.sphere import Sphere
from rendray.vec3 import Color, Point3

world = HittableList()
world.add(Sphere(Point3(0, -100.5, -1), 100, Lambertian(Color(0.8, 0.8, 0.0))))
world.add(Sphere(Point3(0, 0, -1), 0.5, Dielectric(1.5)))
world.add(Cylinder(-1, 1, Metal(Color(0.5, 0.5, 0.5), 0.1)))

camera = Camera(image_width=200, samples_per_pixel=20)
camera.render(world, sys.stdout, sys.stderr)
```

`Camera.render(world, out=None, log=None)` writes to standard output and
standard error when no streams are given.

### Building blocks

- **`rendray.vec3`**
  - `Vec3` is an immutable three-component vector. `Point3` and `Color` are aliases of it.
  - A `Vec3` supports `+`, `-`, `*` (by a scalar, or component-wise by another vector), `/` by a scalar, unary minus, indexing and iteration.
  - The module also provides `dot`, `cross`, `unit_vector`, `reflect` and `refract`.
  - The random sampling helpers are `random_vec`, `random_in_unit_disk`, `random_in_unit_sphere`, `random_unit_vector` and `random_on_hemisphere`.
- **`rendray.interval`**: `Interval(min, max)` has `contains` (closed), `surrounds` (open) and `clamp`. With no arguments it is empty.
- **`rendray.ray`**: `Ray(origin, direction)`. `Ray.at(t)` returns the point at parameter `t`.
- **`rendray.hittable`**
  - `HitRecord` holds the hit point, the normal, the material, `t` and whether the front face was hit.
  - `Hittable` is the abstract base for shapes.
  - `HittableList` holds a group of objects and returns the closest hit among them. It supports `add`, `clear`, `len()` and iteration.
- **`rendray.sphere`**: `Sphere(centre, radius, material)`.
- **`rendray.cylinder`**: `Cylinder(z_min, z_max, material)` is an open cylinder of radius 1 around the z-axis.
- Every shape's `hit(ray, ray_t)` returns a `HitRecord`, or `None` when the ray misses.
- **`rendray.material`**
  - The materials are `Lambertian(albedo)`, `Metal(albedo, fuzz)` and `Dielectric(index_of_refraction)`. A `Metal`'s fuzz is capped at 1.
  - Each material's `scatter(ray_in, rec)` returns `(attenuation, scattered_ray)`, or `None` when the ray is absorbed.
  - `reflectance` is Schlick's approximation.
- **`rendray.camera`**
  - `Camera` is a dataclass. Its settings are `aspect_ratio`, `image_width`, `samples_per_pixel`, `max_depth`, `vfov`, `lookfrom`, `lookat`, `vup`, `defocus_angle` and `focus_dist`.
  - `initialize()` derives the view geometry from the settings.
  - `get_ray(i, j)`, `ray_color(ray, world, depth)` and `write_color(out, pixel_color, samples_per_pixel)` are the per-pixel steps.
  - `linear_to_gamma` applies the gamma-2 correction.
- **`rendray.cli`**: `build_scene()` returns the built-in scene, and `main(argv=None)` runs the `rendray` command.

## What it does not do

- The command always renders the built-in scene. Camera placement, field of view and materials cannot be set from the command line, and scenes cannot be loaded from a file. Other scenes have to be built in Python.
- The only output format is plain-text PPM. PNG and other image files are not written.
- Rendering runs on a single thread.