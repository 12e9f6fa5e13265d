import json
import unittest
from minmodel.vars import VarManager
from minmodel.core.config import MinModelConfig
from minmodel.core.errors import ValidationError, MalformedAssumptionSetError, OracleUnknownError
from minmodel.core.types import validate_clause, validate_cnf

class TestCore(unittest.TestCase):
    def test_var_manager_deterministic(self):
        vm1 = VarManager()
        id1_x = vm1.declare(7)
        id1_y = vm1.declare(3)

        vm2 = VarManager()
        id2_x = vm2.declare(7)
        id2_y = vm2.declare(3)

        self.assertEqual(id1_x, id2_x)
        self.assertEqual(id1_y, id2_y)
        self.assertNotEqual(id1_x, id1_y)
        self.assertEqual(vm1.declare(7), id1_x)

    def test_var_manager_fresh_never_collides(self):
        vm = VarManager()
        x = vm.declare(1)
        aux = vm.fresh()
        # user variable 2 first seen after the auxiliary
        y = vm.declare(2)
        self.assertEqual(len({x, aux, y}), 3)
        self.assertGreater(aux, x)
        self.assertTrue(vm.is_aux(aux))
        self.assertFalse(vm.is_aux(y))
        self.assertEqual(vm.user_ids(), [x, y])
        self.assertEqual(vm.max_id, 3)

    def test_var_manager_translation(self):
        vm = VarManager()
        self.assertEqual(vm.to_internal(-5), -1)
        self.assertEqual(vm.to_internal(9), 2)
        self.assertEqual(vm.to_user(-1), -5)
        self.assertEqual(vm.to_user(2), 9)
        aux = vm.fresh()
        with self.assertRaises(KeyError):
            vm.to_user(aux)

    def test_validate_clause(self):
        self.assertEqual(validate_clause((1, -2)), [1, -2])
        self.assertEqual(validate_clause([]), [])
        with self.assertRaises(ValidationError):
            validate_clause([1, 0])
        with self.assertRaises(ValidationError):
            validate_clause(["a"])
        with self.assertRaises(ValidationError):
            validate_clause(3)

    def test_validate_cnf(self):
        validate_cnf([[1, 2], [-1, 3]])
        with self.assertRaises(ValidationError):
            validate_cnf([[1], [0]])

    def test_error_messages(self):
        err = MalformedAssumptionSetError({5, -3}, [1, 2])
        self.assertEqual(err.extra, [-3, 5])
        self.assertIn("[-3, 5]", str(err))
        unk = OracleUnknownError("negative")
        self.assertEqual(unk.side, "negative")
        self.assertIn("negative", str(unk))

class TestConfig(unittest.TestCase):
    def setUp(self):
        import os
        self._saved = {k: os.environ.pop(k) for k in list(os.environ) if k.startswith("MINMODEL_")}

    def tearDown(self):
        import os
        for k in [k for k in os.environ if k.startswith("MINMODEL_")]:
            del os.environ[k]
        os.environ.update(self._saved)

    def test_defaults(self):
        config = MinModelConfig.from_env_or_file()
        self.assertEqual(config.solver_name, "g3")
        self.assertFalse(config.limited)

    def test_env(self):
        import os
        os.environ["MINMODEL_SOLVER"] = "m22"
        os.environ["MINMODEL_CONF_BUDGET"] = "100"
        config = MinModelConfig.from_env_or_file()
        self.assertEqual(config.solver_name, "m22")
        self.assertEqual(config.conf_budget, 100)
        self.assertTrue(config.limited)

    def test_invalid_env_value(self):
        import os
        os.environ["MINMODEL_CONF_BUDGET"] = "lots"
        with self.assertRaises(ValidationError):
            MinModelConfig.from_env_or_file()

    def test_build_rejects_non_positive_budget(self):
        with self.assertRaises(ValidationError):
            MinModelConfig.build({"conf_budget": 0})

    def test_file(self):
        import os
        import tempfile
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "minmodel.json")
            with open(path, "w") as f:
                json.dump({"solver_name": "cd15", "prop_budget": 5000}, f)
            os.environ["MINMODEL_CONFIG_PATH"] = path
            config = MinModelConfig.from_env_or_file()
        self.assertEqual(config.solver_name, "cd15")
        self.assertEqual(config.prop_budget, 5000)

if __name__ == "__main__":
    unittest.main()
