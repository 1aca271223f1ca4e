from abc import ABC, abstractmethod


class AbstractAgent(ABC):
    def __init__(self, name=None):
        if name is None:
            self.name = type(self).__name__
        else:
            assert type(name) == str, f"Name of an agent should be a str, received {type(name)}"
            self.name = name

    @abstractmethod
    def choose_action(self, *args, **kwargs):
        """
        Choose the server the next request goes to
        :return: the action
        """

        raise NotImplementedError("Subclass of Agent should implement choose_action methode")

    @abstractmethod
    def single_test(self, env, seed):
        """
        Run one simulation on the environment
        :param env: the env on which the agent runs
        :param seed: seed of the random stream shared by env and agent
        :return: the result (and the history) of the run
        """
        raise NotImplementedError("Subclass of Agent should implement single_test methode")

    @abstractmethod
    def multi_test(self, env, seeds):
        """
        Run several simulations on the given environment
        :param env: the env on which the agent runs
        :param seeds: one seed per run
        :return: the aggregated result of the runs
        """
        raise NotImplementedError("Subclass of Agent should implement multi_test methode")
