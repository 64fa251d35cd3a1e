"""Tests for induced prism in opticalc.prism.induced module."""

# pylint: disable=missing-function-docstring

from functools import partial

import chex
import jax
import jax.numpy as jnp
from absl.testing import parameterized

from opticalc.prism import induced_prism, prism_vector
from opticalc.utils import (
    CombinedPrism,
    Eye,
    HorizontalBase,
    VerticalBase,
    make_decentration,
    make_sphero_cyl,
)


class TestInducedPrismLabCases(chex.TestCase):
    """Worked examples from lens surfacing practice."""

    def test_left_eye_oblique_cylinder(self):
        """OS +2.00 -1.00 x 26, 1 mm in and 3 mm up."""
        prism = induced_prism(
            Eye.OS,
            make_sphero_cyl(2.0, -1.0, 26.0),
            make_decentration(vertical_mm=3.0, horizontal_mm=1.0),
        )
        chex.assert_trees_all_close(
            prism.horizontal.amount, 0.06258, atol=1e-4
        )
        self.assertEqual(prism.horizontal.base(), HorizontalBase.IN)
        chex.assert_trees_all_close(
            prism.vertical.amount, 0.31825, atol=1e-4
        )
        self.assertEqual(prism.vertical.base(), VerticalBase.UP)

    def test_right_eye_oblique_cylinder(self):
        """OD +2.00 -1.00 x 26, 1 mm in and 3 mm up."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(2.0, -1.0, 26.0),
            make_decentration(vertical_mm=3.0, horizontal_mm=1.0),
        )
        chex.assert_trees_all_close(
            prism.horizontal.amount, 0.2989, atol=1e-4
        )
        self.assertEqual(prism.horizontal.base(), HorizontalBase.IN)
        chex.assert_trees_all_close(prism.vertical.amount, 0.397, atol=1e-3)
        self.assertEqual(prism.vertical.base(), VerticalBase.UP)

    def test_right_eye_negative_axis(self):
        """OD -2.00 -3.40 x -5, 1.5 mm out and 3 mm down."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(-2.0, -3.4, -5.0),
            make_decentration(vertical_mm=-3.0, horizontal_mm=-1.5),
        )
        chex.assert_trees_all_close(
            prism.horizontal.amount, 0.392434, atol=1e-4
        )
        self.assertEqual(prism.horizontal.base(), HorizontalBase.IN)
        chex.assert_trees_all_close(
            prism.vertical.amount, 1.6565, atol=1e-4
        )
        self.assertEqual(prism.vertical.base(), VerticalBase.UP)

    def test_left_eye_mixed_decentration(self):
        """OS -4.00 +2.00 x 45, 2 mm out and 1 mm up."""
        prism = induced_prism(
            Eye.OS,
            make_sphero_cyl(-4.0, 2.0, 45.0),
            make_decentration(vertical_mm=1.0, horizontal_mm=-2.0),
        )
        chex.assert_trees_all_close(prism.horizontal.amount, 0.7, atol=1e-9)
        self.assertEqual(prism.horizontal.base(), HorizontalBase.IN)
        chex.assert_trees_all_close(prism.vertical.amount, 0.5, atol=1e-9)
        self.assertEqual(prism.vertical.base(), VerticalBase.DOWN)
        self.assertEqual(prism.horizontal.base().value, "In")
        self.assertEqual(prism.vertical.base().value, "Down")

    def test_vertical_only_decentration(self):
        """OD -1.50 -1.50 x 30, 3 mm down."""
        lens = make_sphero_cyl(-1.5, -1.5, 30.0)
        dec = make_decentration(vertical_mm=-3.0)
        vector = prism_vector(Eye.OD, lens, dec)
        chex.assert_trees_all_close(
            vector[0], 0.19485571585149866, atol=1e-9
        )
        prism = induced_prism(Eye.OD, lens, dec)
        self.assertEqual(prism.horizontal.base(), HorizontalBase.OUT)
        chex.assert_trees_all_close(prism.vertical.amount, 0.7875, atol=1e-9)
        self.assertEqual(prism.vertical.base(), VerticalBase.UP)

    def test_oblique_cylinder_along_its_power_meridian(self):
        """OD plano -2.00 x 45, 2.5 mm in and 2.5 mm down."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(0.0, -2.0, 45.0),
            make_decentration(vertical_mm=-2.5, horizontal_mm=2.5),
        )
        chex.assert_trees_all_close(prism.horizontal.amount, 0.5, atol=1e-9)
        self.assertEqual(prism.horizontal.base(), HorizontalBase.OUT)
        chex.assert_trees_all_close(prism.vertical.amount, 0.5, atol=1e-9)
        self.assertEqual(prism.vertical.base(), VerticalBase.UP)
        chex.assert_trees_all_close(
            prism.magnitude(), 0.7071067811865476, atol=1e-12
        )

    def test_oblique_cylinder_along_its_axis(self):
        """Decentering along the cylinder axis induces no prism."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(0.0, -2.0, 135.0),
            make_decentration(vertical_mm=-2.5, horizontal_mm=2.5),
        )
        chex.assert_trees_all_close(prism.horizontal.amount, 0.0, atol=1e-12)
        chex.assert_trees_all_close(prism.vertical.amount, 0.0, atol=1e-12)
        chex.assert_trees_all_close(prism.magnitude(), 0.0, atol=1e-12)

    def test_pure_cylinder_axis_180_vertical(self):
        """Plano -2.00 x 180 decentered 4 mm up gives 0.8 base down."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(0.0, -2.0, 180.0),
            make_decentration(vertical_mm=4.0),
        )
        chex.assert_trees_all_close(prism.vertical.amount, 0.8, atol=1e-9)
        self.assertEqual(prism.vertical.base(), VerticalBase.DOWN)
        chex.assert_trees_all_close(prism.horizontal.amount, 0.0, atol=1e-9)

    def test_pure_cylinder_axis_90_horizontal(self):
        """Plano -2.00 x 90 decentered 3 mm in gives 0.6 base out."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(0.0, -2.0, 90.0),
            make_decentration(horizontal_mm=3.0),
        )
        chex.assert_trees_all_close(prism.horizontal.amount, 0.6, atol=1e-9)
        self.assertEqual(prism.horizontal.base(), HorizontalBase.OUT)
        chex.assert_trees_all_close(prism.vertical.amount, 0.0, atol=1e-9)

    def test_prentice_one_centimeter(self):
        """One diopter in the horizontal meridian over 1 cm is 1 prism."""
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(1.0, -1.0, 0.0),
            make_decentration(horizontal_mm=10.0),
        )
        chex.assert_trees_all_close(
            prism.horizontal.signed(), -1.0, atol=1e-12
        )
        self.assertEqual(prism.horizontal.base(), HorizontalBase.IN)


class TestInducedPrismProperties(chex.TestCase, parameterized.TestCase):
    """Sign conventions and invariants of induced prism."""

    @parameterized.product(
        eye=(Eye.OD, Eye.OS),
        lens=((3.0, 0.0, 0.0), (-6.0, -2.0, 17.0), (0.0, 1.5, 123.0)),
    )
    def test_zero_decentration_gives_no_prism(self, eye: Eye, lens: tuple):
        prism = induced_prism(
            eye, make_sphero_cyl(*lens), make_decentration()
        )
        self.assertEqual(float(prism.horizontal.amount), 0.0)
        self.assertEqual(float(prism.vertical.amount), 0.0)
        self.assertIsNone(prism.horizontal.base())
        self.assertIsNone(prism.vertical.base())

    @parameterized.product(
        power=(-6.0, -2.5, 0.75, 4.0),
        dec_mm=(-8.0, 3.0, 12.5),
    )
    def test_prentice_rule_for_spheres(self, power: float, dec_mm: float):
        prism = induced_prism(
            Eye.OD,
            make_sphero_cyl(power),
            make_decentration(horizontal_mm=dec_mm),
        )
        chex.assert_trees_all_close(
            prism.horizontal.amount,
            abs(power) * abs(dec_mm) / 10.0,
            rtol=1e-12,
        )

    def test_eyes_mirror_horizontally(self):
        """+3.00 DS 5 mm in is 1.5 base in for both eyes."""
        lens = make_sphero_cyl(3.0)
        dec = make_decentration(horizontal_mm=5.0)
        vector_od = prism_vector(Eye.OD, lens, dec)
        vector_os = prism_vector(Eye.OS, lens, dec)
        chex.assert_trees_all_close(vector_od, jnp.array([-1.5, 0.0]))
        chex.assert_trees_all_close(vector_os, jnp.array([1.5, 0.0]))
        for eye in (Eye.OD, Eye.OS):
            prism = induced_prism(eye, lens, dec)
            chex.assert_trees_all_close(prism.horizontal.amount, 1.5)
            self.assertEqual(prism.horizontal.base(), HorizontalBase.IN)
            self.assertIsNone(prism.vertical.base())

    def test_minus_sphere_decentered_in_is_base_out(self):
        for eye in (Eye.OD, Eye.OS):
            prism = induced_prism(
                eye,
                make_sphero_cyl(-4.0),
                make_decentration(horizontal_mm=2.0),
            )
            chex.assert_trees_all_close(prism.horizontal.amount, 0.8)
            self.assertEqual(prism.horizontal.base(), HorizontalBase.OUT)

    def test_vertical_is_eye_independent(self):
        lens = make_sphero_cyl(-1.0, -1.25, 70.0)
        dec = make_decentration(vertical_mm=-2.0)
        prism_od = induced_prism(Eye.OD, lens, dec)
        prism_os = induced_prism(Eye.OS, lens, dec)
        chex.assert_trees_all_close(
            prism_od.vertical.amount, prism_os.vertical.amount, atol=1e-12
        )
        self.assertEqual(prism_od.vertical.base(), prism_os.vertical.base())
        self.assertEqual(prism_od.vertical.base(), VerticalBase.UP)

    def test_magnitude_matches_vector_norm(self):
        lens = make_sphero_cyl(1.25, -2.0, 160.0)
        dec = make_decentration(vertical_mm=1.5, horizontal_mm=-4.0)
        vector = prism_vector(Eye.OS, lens, dec)
        prism = induced_prism(Eye.OS, lens, dec)
        chex.assert_trees_all_close(
            prism.magnitude(), jnp.linalg.norm(vector), atol=1e-12
        )

    def test_amounts_never_negative(self):
        lens = make_sphero_cyl(-3.0, 1.0, 110.0)
        for vertical_mm, horizontal_mm in ((2.0, -3.0), (-4.0, 5.0)):
            for eye in (Eye.OD, Eye.OS):
                prism = induced_prism(
                    eye, lens, make_decentration(vertical_mm, horizontal_mm)
                )
                self.assertGreaterEqual(float(prism.horizontal.amount), 0.0)
                self.assertGreaterEqual(float(prism.vertical.amount), 0.0)


class TestInducedPrismTransforms(chex.TestCase):
    """induced_prism under JAX transformations."""

    @chex.variants(with_jit=True, without_jit=True)
    def test_right_eye_variants(self):
        var_prism = self.variant(partial(induced_prism, Eye.OD))
        prism = var_prism(
            make_sphero_cyl(0.0, -2.0, 90.0),
            make_decentration(horizontal_mm=3.0),
        )
        self.assertIsInstance(prism, CombinedPrism)
        chex.assert_trees_all_close(prism.horizontal.amount, 0.6, atol=1e-9)
        self.assertFalse(bool(prism.horizontal.base_in))

    def test_vmap_over_decentration(self):
        lens = make_sphero_cyl(-2.0, -1.0, 30.0)
        offsets = jnp.array([-4.0, -1.0, 0.0, 2.0, 5.0])
        vectors = jax.vmap(
            lambda h: prism_vector(
                Eye.OD, lens, make_decentration(horizontal_mm=h)
            )
        )(offsets)
        chex.assert_shape(vectors, (5, 2))
        per_mm = prism_vector(
            Eye.OD, lens, make_decentration(horizontal_mm=1.0)
        )
        chex.assert_trees_all_close(
            vectors, offsets[:, None] * per_mm[None, :], atol=1e-12
        )

    def test_gradient_with_respect_to_sphere(self):
        """d(horizontal)/dS is minus the in decentration in cm for OD."""
        dec = make_decentration(horizontal_mm=5.0)

        def horizontal(sphere):
            lens = make_sphero_cyl(sphere, -1.0, 30.0)
            return prism_vector(Eye.OD, lens, dec)[0]

        chex.assert_trees_all_close(
            jax.grad(horizontal)(2.0), -0.5, atol=1e-12
        )
