from abc import abstractmethod

from agent.abstract.Agent import AbstractAgent


class AbstractAlgo(AbstractAgent):

    @abstractmethod
    def update(self, action, reward):
        """
        Learn from the reward observed after taking action
        :param action: the server the request was sent to
        :param reward: the observed reward
        :return: the new value estimate of action
        """
        raise NotImplementedError("Subclass of AbstractAlgo should implement update methode")

    @abstractmethod
    def get_q_values(self):
        """
        :return: current value estimates, one per server
        """
        raise NotImplementedError("Subclass of AbstractAlgo should implement get_q_values methode")

    @abstractmethod
    def get_probabilities(self):
        """
        :return: current selection probabilities, one per server
        """
        raise NotImplementedError("Subclass of AbstractAlgo should implement get_probabilities methode")
