"""Payment and lead intake for the Newteam F.C. website."""
