from typing import Dict, List, Set

class VarManager:
    """
    Centralized manager for solver variable allocation.
    User variables are mapped to internal ids on first sight, and auxiliary
    variables are drawn from the same counter, so a fresh auxiliary is always
    larger than every id handed out before it and the two namespaces never
    collide even when new user variables show up after auxiliaries.
    """
    def __init__(self):
        self._user_to_id: Dict[int, int] = {}
        self._id_to_user: Dict[int, int] = {}
        self._next_id: int = 1
        self._aux_vars: Set[int] = set()

    @property
    def max_id(self) -> int:
        return self._next_id - 1

    @property
    def num_user_vars(self) -> int:
        return len(self._user_to_id)

    def declare(self, user_var: int) -> int:
        """
        Declare a user variable. Returns existing ID if already declared.
        """
        if user_var in self._user_to_id:
            return self._user_to_id[user_var]

        vid = self._next_id
        self._user_to_id[user_var] = vid
        self._id_to_user[vid] = user_var
        self._next_id += 1
        return vid

    def fresh(self) -> int:
        """
        Allocate a fresh auxiliary variable.
        """
        vid = self._next_id
        self._aux_vars.add(vid)
        self._next_id += 1
        return vid

    def to_internal(self, lit: int) -> int:
        """Map a user literal to an internal literal, declaring its variable."""
        vid = self.declare(abs(lit))
        return vid if lit > 0 else -vid

    def to_user(self, lit: int) -> int:
        """Map an internal literal over a user variable back to the user literal."""
        var = self._id_to_user.get(abs(lit))
        if var is None:
            raise KeyError(f"Internal variable {abs(lit)} is not a user variable")
        return var if lit > 0 else -var

    def is_aux(self, vid: int) -> bool:
        return vid in self._aux_vars

    def user_ids(self) -> List[int]:
        """Internal ids of user variables, in first-seen order."""
        return list(self._id_to_user)
