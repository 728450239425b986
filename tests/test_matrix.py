import unittest

from churp import (
    BivariatePolynomial,
    G,
    Point,
    Polynomial,
    VerificationMatrix,
    VerificationMatrixDimensionMismatch,
)


class Tests(unittest.TestCase):
    def setUp(self):
        # B(x, y) = 1 + 2y + 3x + 4xy
        self.bp = BivariatePolynomial(((1, 2), (3, 4)))
        self.vm = VerificationMatrix.from_bivariate(self.bp)

    def test_from_bivariate(self):
        vm = self.vm
        self.assertEqual(vm.dimensions(), (2, 2))
        self.assertEqual(vm.element(0, 0), G)
        self.assertEqual(vm.element(0, 1), 2 * G)
        self.assertEqual(vm.element(1, 0), 3 * G)
        self.assertEqual(vm.element(1, 1), 4 * G)

    def test_dimensions(self):
        bp = BivariatePolynomial.zero(1, 2)
        self.assertEqual(VerificationMatrix.from_bivariate(bp).dimensions(), (2, 3))

    def test_zero_hole(self):
        self.assertFalse(self.vm.is_zero_hole())
        zh = VerificationMatrix.from_bivariate(self.bp.to_zero_hole())
        self.assertTrue(zh.is_zero_hole())
        self.assertTrue(zh.element(0, 0).is_identity())

    def test_verify(self):
        self.assertTrue(self.vm.verify(2, 5, 57))
        self.assertFalse(self.vm.verify(2, 5, 58))
        self.assertTrue(self.vm.verify(0, 0, 1))

    def test_verify_x(self):
        x = 9
        self.assertTrue(self.vm.verify_x(x, self.bp.eval_x(x)))
        self.assertFalse(self.vm.verify_x(x + 1, self.bp.eval_x(x)))
        self.assertFalse(self.vm.verify_x(x, self.bp.eval_y(x)))
        self.assertFalse(self.vm.verify_x(x, Polynomial((1, 2, 3))))

    def test_verify_y(self):
        y = 13
        self.assertTrue(self.vm.verify_y(y, self.bp.eval_y(y)))
        self.assertFalse(self.vm.verify_y(y + 1, self.bp.eval_y(y)))
        self.assertFalse(self.vm.verify_y(y, Polynomial((1,))))

    def test_verify_random(self):
        bp = BivariatePolynomial.random(1, 2)
        vm = VerificationMatrix.from_bivariate(bp)
        self.assertTrue(vm.verify_x(5, bp.eval_x(5)))
        self.assertTrue(vm.verify_y(6, bp.eval_y(6)))

    def test_arithmetic(self):
        other = BivariatePolynomial(((0, 1), (1, 1)))
        vm_other = VerificationMatrix.from_bivariate(other)
        self.assertEqual(
            self.vm + vm_other, VerificationMatrix.from_bivariate(self.bp + other)
        )
        self.assertEqual((self.vm + vm_other) - vm_other, self.vm)

    def test_dimension_mismatch(self):
        other = VerificationMatrix.from_bivariate(BivariatePolynomial(((1, 2, 3),)))
        with self.assertRaises(VerificationMatrixDimensionMismatch):
            self.vm + other
        with self.assertRaises(VerificationMatrixDimensionMismatch):
            self.vm - other

    def test_bytes(self):
        zh = VerificationMatrix.from_bivariate(self.bp.to_zero_hole())
        data = zh.to_bytes()
        self.assertEqual(len(data), 2 + 4 * 33)
        self.assertEqual(data[:2], b"\x02\x02")
        self.assertEqual(VerificationMatrix.from_bytes(data), zh)

        with self.assertRaises(ValueError):
            VerificationMatrix.from_bytes(data[:-1])
        with self.assertRaises(ValueError):
            VerificationMatrix.from_bytes(b"\x02")
        with self.assertRaises(ValueError):
            VerificationMatrix.from_bytes(b"\x00\x00")

    def test_invalid(self):
        with self.assertRaises(ValueError):
            VerificationMatrix(())
        with self.assertRaises(ValueError):
            VerificationMatrix(((G, G), (G,)))
        with self.assertRaises(ValueError):
            VerificationMatrix(((G, 1),))
        self.assertEqual(VerificationMatrix(((Point(),),)).dimensions(), (1, 1))


if __name__ == "__main__":
    unittest.main()
