from abc import ABC, abstractmethod


class AbstractReporter(ABC):

    @abstractmethod
    def report_initial(self, true_latencies):
        """
        Show the hidden latencies the run starts from
        :param true_latencies: one value (ms) per server
        :return: None
        """
        raise NotImplementedError("Subclass of Reporter should implement report_initial methode")

    @abstractmethod
    def report_progress(self, snapshot):
        """
        Show the state of the run at a reporting point
        :param snapshot: Snapshot taken by the driver
        :return: None
        """
        raise NotImplementedError("Subclass of Reporter should implement report_progress methode")

    @abstractmethod
    def report_final(self, result):
        """
        Show the summary of a finished run
        :param result: SingleResult of the run
        :return: None
        """
        raise NotImplementedError("Subclass of Reporter should implement report_final methode")
