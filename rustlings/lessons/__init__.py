"""Worked solutions to the exercises, written as plain Python."""