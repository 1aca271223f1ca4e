from abc import ABC, abstractmethod


class AbstractEnvironment(ABC):
    def env_snap(self):
        return vars(self)

    @abstractmethod
    def step(self, action):
        """
        Send one request to the chosen server and return the feedback from env:
        :return: observed latency, reward, flag of done (done)
        """
        raise NotImplementedError("Subclass of Environment should implement step methode")

    @abstractmethod
    def reset(self, rng):
        """
        Reset the env, drawing the hidden ground truth from rng

        :return: The initial true latencies
        """
        raise NotImplementedError("Subclass of Environment should implement reset methode")

    @abstractmethod
    def drift(self):
        """
        Let the hidden ground truth change by one time step, whatever action was taken
        """
        raise NotImplementedError("Subclass of Environment should implement drift methode")

    @abstractmethod
    def get_action_space(self):
        """
        Get the size of action space, which is the number of candidate servers

        :return: The size of action space
        """
        raise NotImplementedError("Subclass of Environment should implement this methode")

    @abstractmethod
    def render(self):
        """
        Show a visio of the environment

        """
        raise NotImplementedError("Subclass of Environment should implement this methode")
