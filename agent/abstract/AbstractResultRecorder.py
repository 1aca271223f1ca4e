from abc import ABC, abstractmethod


class AbstractResultRecorder(ABC):

    @abstractmethod
    def update(self, *args, **kwargs) -> None:

        """
        Record a new outcome (one request, or one whole run)
        :return: None
        """
        raise NotImplementedError("Subclass of ResultRecorder should implement update methode")

    def get_summary(self, *args, **kwargs) -> dict:
        """
        Get summary of what has been recorded so far
        :return:
        """
        raise NotImplementedError("Subclass of ResultRecorder should implement get summary methode")
