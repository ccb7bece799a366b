from brainapi.domain.shared.model.value import ValueObject


class GroupCount(ValueObject):
    label: str
    count: int
