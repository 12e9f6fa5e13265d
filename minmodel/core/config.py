import os
import json
from typing import Optional
from pydantic import BaseModel, Field

from minmodel.core.errors import ValidationError

class MinModelConfig(BaseModel):
    """Oracle configuration shared by the positive and negative solvers."""
    solver_name: str = "g3"
    # When either budget is set, queries go through solve_limited and may
    # come back UNKNOWN.
    conf_budget: Optional[int] = Field(default=None, gt=0)
    prop_budget: Optional[int] = Field(default=None, gt=0)

    @property
    def limited(self) -> bool:
        return self.conf_budget is not None or self.prop_budget is not None

    @staticmethod
    def build(data: dict) -> 'MinModelConfig':
        """Validates raw settings, raising ValidationError on bad values."""
        try:
            return MinModelConfig.model_validate(data)
        except Exception as e:
            raise ValidationError(f"Invalid configuration: {e}")

    @staticmethod
    def from_env_or_file() -> 'MinModelConfig':
        # 1. Try Env Vars
        env = {}
        if os.environ.get("MINMODEL_SOLVER"):
            env["solver_name"] = os.environ["MINMODEL_SOLVER"]
        if os.environ.get("MINMODEL_CONF_BUDGET"):
            env["conf_budget"] = os.environ["MINMODEL_CONF_BUDGET"]
        if os.environ.get("MINMODEL_PROP_BUDGET"):
            env["prop_budget"] = os.environ["MINMODEL_PROP_BUDGET"]
        if env:
            return MinModelConfig.build(env)

        # 2. Try Config Path
        config_path = os.environ.get("MINMODEL_CONFIG_PATH")
        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise ValidationError(f"Invalid configuration file {config_path}: {e}")
            return MinModelConfig.build(data)

        # Default
        return MinModelConfig()
