"""uicomposercli - command line front end for uicomposer."""
