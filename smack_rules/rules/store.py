"""
Smack rule store
In-memory subject -> object -> access mask map with query and update operations
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict

from ..access.mask import AccessMask, parse_access
from ..constants import SMACK_LABEL_LEN
from ..exceptions import LabelRangeError, RuleStoreClosedError
from ..utils.validators import label_length


class AccessRule(BaseModel):
    """Single (subject, object, access) rule as yielded by RuleStore.rules()"""
    model_config = ConfigDict(frozen=True)

    subject: str
    object: str
    access: AccessMask


class RuleStore:
    """
    Two-level rule map keyed by subject label, then object label.

    Dicts keep insertion order, which is the order rules are written
    back to a rule file. A subject may be present with no objects.
    """

    def __init__(self):
        self._subjects: Dict[str, Dict[str, AccessMask]] = {}
        self._closed = False

    def __enter__(self) -> "RuleStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __len__(self) -> int:
        self._check_open("len")
        return sum(len(objects) for objects in self._subjects.values())

    def __contains__(self, rule: Tuple[str, str]) -> bool:
        self._check_open("contains")
        subject, obj = rule
        return obj in self._subjects.get(subject, {})

    def __repr__(self) -> str:
        if self._closed:
            return "<RuleStore destroyed>"
        return f"<RuleStore subjects={len(self._subjects)} rules={len(self)}>"

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise RuleStoreClosedError(operation)

    @property
    def closed(self) -> bool:
        return self._closed

    def destroy(self) -> None:
        """Release every subject and object entry; the store is unusable afterwards"""
        for objects in self._subjects.values():
            objects.clear()
        self._subjects.clear()
        self._closed = True

    def upsert(self, subject: str, obj: str, access: Union[AccessMask, int]) -> None:
        """
        Set the access mask for a subject/object pair, creating entries as needed.

        Raises LabelRangeError only when *both* labels are longer than
        SMACK_LABEL_LEN bytes. A rule with a single overlong label is
        accepted; this matches the rule library's historical guard.
        Labels are measured as UTF-8; one that cannot be encoded raises
        ValidationError.
        """
        self._check_open("upsert")
        if label_length(subject) > SMACK_LABEL_LEN and label_length(obj) > SMACK_LABEL_LEN:
            raise LabelRangeError(subject, obj)

        objects = self._subjects.setdefault(subject, {})
        objects[obj] = AccessMask(access)

    def add_rule(self, subject: str, obj: str, access_spec: str) -> None:
        """Add or overwrite a rule from a textual access spec such as "rwx" """
        self.upsert(subject, obj, parse_access(access_spec))

    def remove(self, subject: str, obj: str) -> bool:
        """Remove a single rule; the subject entry is kept even if it becomes empty"""
        self._check_open("remove")
        objects = self._subjects.get(subject)
        if objects is None or obj not in objects:
            return False

        del objects[obj]
        return True

    def remove_by_subject(self, subject: str) -> None:
        """Remove every rule of a subject, leaving the subject present and empty"""
        self._check_open("remove_by_subject")
        objects = self._subjects.get(subject)
        if objects is not None:
            objects.clear()

    def remove_by_object(self, obj: str) -> None:
        """Remove the rules for an object under every subject"""
        self._check_open("remove_by_object")
        for objects in self._subjects.values():
            if obj in objects:
                del objects[obj]

    def query(self, subject: str, obj: str, requested_spec: str) -> bool:
        """
        Check whether subject has all requested access to object.

        Returns False when there is no rule for the pair. Otherwise the
        stored mask must be a superset of the requested one, so an
        empty request is granted for any existing rule.
        """
        self._check_open("query")
        requested = parse_access(requested_spec)

        stored = self._subjects.get(subject, {}).get(obj)
        if stored is None:
            return False

        return (stored & requested) == requested

    def get_access(self, subject: str, obj: str) -> Optional[AccessMask]:
        """Get the stored access mask for a pair, or None if there is no rule"""
        self._check_open("get_access")
        return self._subjects.get(subject, {}).get(obj)

    def subjects(self) -> List[str]:
        """Subject labels in insertion order, including subjects with no rules"""
        self._check_open("subjects")
        return list(self._subjects)

    def objects(self, subject: str) -> List[str]:
        """Object labels of a subject in insertion order"""
        self._check_open("objects")
        return list(self._subjects.get(subject, {}))

    def rules(self, subject: Optional[str] = None) -> Iterator[AccessRule]:
        """Iterate rules in file order, optionally for a single subject"""
        self._check_open("rules")
        if subject is not None:
            items = [(subject, self._subjects.get(subject, {}))]
        else:
            items = list(self._subjects.items())

        for subject_label, objects in items:
            for object_label, access in list(objects.items()):
                yield AccessRule(subject=subject_label, object=object_label, access=access)

    def replace(self, other: "RuleStore") -> None:
        """Take over the whole content of another store, leaving it empty"""
        self._check_open("replace")
        other._check_open("replace")
        self._subjects = other._subjects
        other._subjects = {}
