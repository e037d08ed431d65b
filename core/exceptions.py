class PoemStoreError(Exception):
    """Базовая ошибка работы с удалённым хранилищем стихов."""


class LoadFailure(PoemStoreError):
    """Загрузка не удалась, нужно показать локальные стихи."""


class NetworkFailure(LoadFailure):
    """Транспортная ошибка или ответ не 2xx."""


class MalformedPayload(LoadFailure):
    """Тело ответа не JSON или не список / {"poems": [...]}."""


class EmptyNormalizedResult(LoadFailure):
    """После фильтрации не осталось ни одной записи."""


class SubmitError(PoemStoreError):
    pass


class ValidationError(SubmitError):
    """Пустой заголовок или текст; запрос не отправляется."""


class SubmitFailure(SubmitError):
    """Сервер не принял новый стих."""
