from .designs import Design, DesignData, DesignStore, DesignFormatError
